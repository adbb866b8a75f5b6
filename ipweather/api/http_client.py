"""
http_client.py: Single blocking GET helper shared by every upstream client.

Transport problems (connection refused, DNS, timeout) become FetchError; a
body that arrives but is not JSON becomes ResponseError so callers can tell
"the server didn't respond" from "the server responded with something we
don't understand". HTTP status codes are left to the callers, since some
providers put a useful JSON body on error statuses.
"""

from typing import Any, Dict, Optional

import requests

from ipweather.config import DEFAULT_TIMEOUT
from ipweather.errors import FetchError, ResponseError
from ipweather.utils.log_util import app_logger

logger = app_logger(__name__)


def get_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """
    Fetch `url` once and decode its JSON body.

    :param url: Absolute URL without query string.
    :param params: Optional query parameters.
    :param timeout: Seconds before the request is abandoned.
    :return: Decoded JSON value.
    :raises FetchError: On any transport failure, including timeout.
    :raises ResponseError: If the body is not valid JSON.
    """
    logger.debug(f"GET {url}")
    try:
        resp = requests.get(url, params=params, timeout=timeout)
    except requests.exceptions.Timeout as e:
        logger.error(f"Request to {url} timed out after {timeout}s")
        raise FetchError(f"Request to {url} timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request to {url} failed: {e}")
        raise FetchError(str(e)) from e

    logger.debug(f"GET {url} -> {resp.status_code}")
    try:
        return resp.json()
    except ValueError as e:
        logger.error(f"Non-JSON response from {url}: {resp.status_code}")
        raise ResponseError(
            f"Unexpected response from {url} (HTTP {resp.status_code})"
        ) from e
