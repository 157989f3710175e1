"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-pix-jira.utils.date")

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_date(date_str: str | None, format_string: str = DATE_FORMAT) -> str:
    """
    Parse a date string from ISO format to a specified format.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    The original UTC offset is kept, so the same input always renders the
    same output regardless of the host timezone.

    Args:
        date_str: Date string
        format_string: The output format (default: "%Y-%m-%d")

    Returns:
        Formatted date string, empty string if date_str is empty, or the
        original string if it cannot be parsed
    """
    if not date_str:
        return ""

    try:
        if date_str.isdigit():
            date = datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        else:
            date = dateutil.parser.parse(date_str)
        return date.strftime(format_string)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {e}")

    return date_str


def format_date(date_str: str | None) -> str:
    """Render a JIRA timestamp as a calendar date (YYYY-MM-DD)."""
    return parse_date(date_str, DATE_FORMAT)


def format_datetime(date_str: str | None) -> str:
    """Render a JIRA timestamp as date and time (YYYY-MM-DD HH:MM:SS)."""
    return parse_date(date_str, DATETIME_FORMAT)
