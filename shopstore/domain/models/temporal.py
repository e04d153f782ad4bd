"""Timestamp convention shared by every entity.

Timestamps are stored as ``YYYY-MM-DD HH:MM:SS`` strings in UTC.  Two
sentinels stand in for NULL:

  MAX_DATETIME   soft_deleted_at of a live (not deleted) entity
  NULL_DATETIME  "not set yet", e.g. a discount without a start/end window

Soft deletion is decided by string inequality with MAX_DATETIME, not by
comparing against the clock: a future timestamp still counts as deleted.
"""

from __future__ import annotations

from datetime import datetime, timezone

from .errors import MalformedTimestampError

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_DATE = "9999-12-31"
MAX_DATETIME = "9999-12-31 23:59:59"
NULL_DATE = "0002-01-01"
NULL_DATETIME = "0002-01-01 00:00:00"


def format_datetime(value: datetime) -> str:
    """Render ``value`` in storage format, converting aware values to UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    # strftime does not zero-pad years below 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d} " + value.strftime("%H:%M:%S")


def now_datetime() -> str:
    return format_datetime(datetime.now(timezone.utc))


def parse_datetime(value: str) -> datetime:
    """Parse a stored timestamp into an aware UTC datetime.

    Raises MalformedTimestampError for anything not in DATETIME_FORMAT.
    """
    try:
        parsed = datetime.strptime(value, DATETIME_FORMAT)
    except (TypeError, ValueError) as exc:
        raise MalformedTimestampError(f"invalid timestamp {value!r}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def is_soft_deleted(soft_deleted_at: str) -> bool:
    return soft_deleted_at != MAX_DATETIME
