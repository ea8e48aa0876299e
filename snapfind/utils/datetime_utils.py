"""
Centralized DateTime Utilities
==============================

Consistent datetime handling across the service layer. Timestamps are
persisted in UTC; calendar-day logic (the daily capture quota) uses the
timezone configured in snapfind.core.config.

Functions:
- utc_now(): current UTC time, timezone-aware
- ensure_utc(): normalize any datetime into aware UTC
- now(): current time in the application timezone
- parse_iso() / to_iso(): ISO 8601 conversion
- local_day_bounds(): UTC instants of local midnight today and tomorrow
"""
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional, Tuple

from ..core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().local_timezone

    if not tz_str or tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def now() -> datetime:
    """Current datetime in the application-configured timezone."""
    return datetime.now(_get_app_timezone())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    If string is naive, assumes application timezone.

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str:
        return None

    try:
        dt = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string ('Z' suffix for UTC).
    If datetime is naive, assumes UTC, the way the stores hand them back.
    """
    if dt is None:
        return None

    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_day_bounds(reference: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    Get the calendar day containing ``reference`` in the application timezone.

    Args:
        reference: Instant to locate (defaults to now); naive values are UTC

    Returns:
        (start, end) as aware UTC datetimes: local midnight of that day and
        local midnight of the following day
    """
    app_tz = _get_app_timezone()
    local_ref = (ensure_utc(reference) if reference else utc_now()).astimezone(app_tz)

    local_start = datetime(local_ref.year, local_ref.month, local_ref.day, tzinfo=app_tz)
    next_day = local_start.date() + timedelta(days=1)
    local_end = datetime(next_day.year, next_day.month, next_day.day, tzinfo=app_tz)

    return local_start.astimezone(dt_timezone.utc), local_end.astimezone(dt_timezone.utc)
