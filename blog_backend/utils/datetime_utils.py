"""
Centralized DateTime Utilities
==============================

All timestamps persisted to MongoDB are timezone-aware UTC datetimes and
are emitted to clients as ISO 8601 strings.

Functions:
- utc_now(): current UTC time (timezone-aware)
- ensure_utc(): normalize naive / aware datetimes to aware UTC
- to_iso(): convert a datetime to an ISO 8601 string ("...Z")
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


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


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC.
    
    Args:
        dt: datetime object (timezone-aware or naive UTC)
    
    Returns:
        ISO 8601 formatted string with millisecond precision
        (e.g., "2025-12-24T10:30:00.123Z"), or None if dt is None
    """
    dt = ensure_utc(dt)
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
