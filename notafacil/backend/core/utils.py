"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC. This ensures consistent behavior across
    the codebase and simplifies database storage.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to timezone-naive UTC.

    Aware values are converted to UTC before tzinfo is dropped.
    Naive values are assumed to already be UTC and returned unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def to_iso_z(value: datetime) -> str:
    """Format a naive-UTC datetime as ISO 8601 with millisecond precision and a Z suffix."""
    return to_naive_utc(value).isoformat(timespec="milliseconds") + "Z"
