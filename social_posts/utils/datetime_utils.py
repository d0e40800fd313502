"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in social_posts.core.config.

Functions:
- now(): Returns timezone-aware datetime object, truncated to milliseconds
- next_timestamp(): now(), but strictly later than a previous write
- to_iso(): Convert datetime object to ISO 8601 string

MongoDB stores datetimes with millisecond precision, so now() never carries
more than that. Values written and values read back compare equal.
"""
import logging
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from social_posts.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return ZoneInfo(tz_str)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object with millisecond precision
    """
    current = datetime.now(_get_app_timezone())
    return current.replace(microsecond=(current.microsecond // 1000) * 1000)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Get a write timestamp strictly later than ``previous``.

    Two writes within the same millisecond would otherwise share a value,
    so the result is ``previous`` plus one millisecond whenever the clock
    has not moved past it yet.

    Args:
        previous: Timestamp of the last write (naive values are UTC), or None

    Returns:
        timezone-aware datetime object with millisecond precision
    """
    current = now()
    if previous is None:
        return current

    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=dt_timezone.utc)
    return max(current, previous + timedelta(milliseconds=1))


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    Naive datetimes are the ones read back from MongoDB, which are UTC.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)

    # Format with timezone offset, or 'Z' if UTC
    if dt.utcoffset() == dt_timezone.utc.utcoffset(None):
        return dt.astimezone(dt_timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return dt.isoformat(timespec="milliseconds")
