"""Utility functions for Jira operations."""

import re
from collections.abc import Iterable

# Jira working time: 5-day weeks of 8-hour days
_TIME_UNITS = {"w": 5 * 8 * 3600, "d": 8 * 3600, "h": 3600, "m": 60}


def join_param(value: str | Iterable[str] | None) -> str | None:
    """Convert a list/tuple/set of names into the comma-separated form."""
    if value is None or isinstance(value, str):
        return value
    return ",".join(value)


def format_duration_from_seconds(seconds: int) -> str:
    """
    Format a duration as Jira ``timeSpent`` notation.

    Seconds are floored to whole minutes and negative input counts as zero.

    Args:
        seconds: Duration in seconds

    Returns:
        A string such as ``"1h 10m"`` or ``"0m"``
    """
    minutes = max(seconds, 0) // 60
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def parse_time_spent(time_spent: str) -> int:
    """
    Parse a time spent string into seconds.

    Weeks count five working days and days count eight hours.

    Args:
        time_spent: Time spent string (e.g. 1h 30m, 1d, etc.)

    Returns:
        Time spent in seconds

    Raises:
        ValueError: If no duration can be read from the string
    """
    # Base case for direct specification in seconds
    if time_spent.endswith("s"):
        try:
            return int(time_spent[:-1])
        except ValueError:
            pass

    total_seconds = 0
    for amount, unit in re.findall(r"(\d+)\s*([wdhm])", time_spent):
        total_seconds += int(amount) * _TIME_UNITS[unit]

    if total_seconds == 0:
        raise ValueError(f"Could not parse time spent {time_spent!r}")

    return total_seconds
