"""
Timestamp conversion utilities.

The price provider reports unix seconds, saved result bundles carry ISO-8601
strings, and the simulator works with UTC datetimes.
"""

from datetime import datetime, timezone
from typing import Union

Timestamp = Union[datetime, int, float, str]


def from_unix_seconds(seconds: Union[int, float]) -> datetime:
    """Convert unix seconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def to_unix_seconds(ts: datetime) -> int:
    """Convert a datetime to whole unix seconds."""
    return int(ensure_utc(ts).timestamp())


def ensure_utc(ts: datetime) -> datetime:
    """
    Return ``ts`` as a UTC datetime.

    Naive datetimes are assumed to already be in UTC.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def to_iso(ts: datetime) -> str:
    """Format a timestamp the way result bundles store it (``...Z`` suffix)."""
    return ensure_utc(ts).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Timestamp) -> datetime:
    """
    Coerce a timestamp-like value into a UTC datetime.

    Args:
        value: datetime, unix seconds, or an ISO-8601 string

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ValueError: If a string cannot be parsed as ISO-8601
        TypeError: If the value has an unsupported type
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid timestamp")
    if isinstance(value, (int, float)):
        return from_unix_seconds(value)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return ensure_utc(datetime.fromisoformat(text))
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")
