"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

from datetime import datetime, timezone, tzinfo


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All stored datetime values are timezone-naive and assumed to be UTC.
    Conversion to and from the display timezone happens at the edges
    (CLI input/output, reminder calendar fields).

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_display(value: datetime, tz: tzinfo | None = None) -> datetime:
    """
    Convert a stored naive-UTC datetime into the display timezone.

    Args:
        value: Naive UTC datetime
        tz: Target timezone, or None for system local time

    Returns:
        Aware datetime in the target timezone
    """
    return value.replace(tzinfo=timezone.utc).astimezone(tz)


def from_display(value: datetime, tz: tzinfo | None = None) -> datetime:
    """
    Convert a user-entered datetime into stored naive UTC.

    Naive input is interpreted in ``tz`` (system local time when None).
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz) if tz is not None else value.astimezone()
    return value.astimezone(timezone.utc).replace(tzinfo=None)
