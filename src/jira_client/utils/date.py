"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-client")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a date string from any format to a datetime object.

    The input accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Unparseable input is logged and yields None.

    Args:
        date_str: Date string

    Returns:
        Parsed datetime or None
    """
    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    try:
        return dateutil.parser.parse(date_str)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse date {date_str!r}: {e}")
        return None
