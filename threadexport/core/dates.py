"""
Date formatting for exported comment timestamps.

All formats are rendered in UTC regardless of the local timezone.
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional


def _utc(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def _date_time_part(dt: datetime) -> str:
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def format_date(timestamp: Optional[float], date_format: str = "iso8601") -> str:
    """
    Format a Unix timestamp for display.

    Args:
        timestamp: Epoch seconds, or None when the comment has no date
        date_format: One of "iso8601", "rfc1123" or "utc"

    Returns:
        The formatted string, or "" when there is no timestamp

    Examples:
        format_date(1741703950, "iso8601")  # "2025-03-11T14:39:10+00:00"
        format_date(1741703950, "rfc1123")  # "Tue, 11 Mar 2025 14:39:10 GMT"
        format_date(1741703950, "utc")      # "2025-03-11T14:39:10Z"
    """
    if not timestamp:
        return ""

    dt = _utc(timestamp)

    if date_format == "iso8601":
        return f"{_date_time_part(dt)}+00:00"
    if date_format == "rfc1123":
        return format_datetime(dt, usegmt=True)
    if date_format == "utc":
        return f"{_date_time_part(dt)}Z"

    # Unknown selector: full ISO form with milliseconds
    return f"{_date_time_part(dt)}.{dt.microsecond // 1000:03d}Z"
