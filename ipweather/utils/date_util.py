from datetime import date, datetime
from typing import Optional

import pytz
from dateutil import parser

from ipweather.utils.log_util import app_logger

logger = app_logger(__name__)


def to_date(date_string: str) -> datetime:
    """
    Convert a date string to a datetime object.

    :param date_string: str - The date string to parse.
    :return: datetime - Parsed datetime object.
    :raises: ValueError if date string parsing fails.
    """
    try:
        return parser.parse(date_string)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Error parsing date string {date_string!r}: {e}")
        raise ValueError(f"Unparseable date: {date_string!r}") from e


def format_timestamp(date_string: str) -> str:
    """
    Render an upstream timestamp as "Sat 28 Dec 2024 10:00 UTC".

    Falls back to the raw string when it cannot be parsed.
    """
    if not date_string:
        return ""
    try:
        parsed = to_date(date_string)
    except ValueError:
        return date_string
    text = parsed.strftime("%a %d %b %Y %H:%M")
    zone = parsed.tzname()
    return f"{text} {zone}" if zone else text


def local_today(tz_name: Optional[str] = None, now: Optional[datetime] = None) -> date:
    """
    Return today's date, in `tz_name` when it is a known IANA zone.

    :param tz_name: Optional timezone name, e.g. "Europe/London".
    :param now: Optional aware or naive "now" for testing.
    :return: The calendar date at that location (machine local otherwise).
    """
    if tz_name:
        try:
            zone = pytz.timezone(tz_name)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone {tz_name!r}, using local date")
        else:
            if now is None:
                return datetime.now(zone).date()
            if now.tzinfo is None:
                now = pytz.utc.localize(now)
            return now.astimezone(zone).date()

    return (now or datetime.now()).date()


def format_query_date(day: date) -> str:
    """Format a date the way the astronomy endpoint expects (YYYY-MM-DD)."""
    return day.strftime("%Y-%m-%d")
