from ipweather.errors import InvalidArgumentError

MIN_DAYS = 1
MAX_DAYS = 5


def validate_days(days: int) -> int:
    """
    Check a forecast/alert day count is within 1-5 inclusive.

    :param days: Requested number of days.
    :return: The same value when valid.
    :raises InvalidArgumentError: Carrying the offending value otherwise.
    """
    if MIN_DAYS <= days <= MAX_DAYS:
        return days
    raise InvalidArgumentError(
        str(days), f"Days should be between {MIN_DAYS} and {MAX_DAYS}."
    )
