"""DateTime helpers.

Timestamps are persisted as naive UTC datetimes, since SQLite does not keep
timezone information.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already.

    Example:
        >>> to_naive_utc(datetime(2024, 1, 1, 9, tzinfo=timezone.utc))
        datetime.datetime(2024, 1, 1, 9, 0)
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
