"""Display formatting helpers for timestamps and durations."""

from __future__ import annotations

from datetime import datetime, timezone

from ecseagle.constants.values import (
    EMPTY_VALUE,
    EVENT_TIMESTAMP_FORMAT,
    LAST_UPDATE_FORMAT,
)

_TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_relative_time(value: datetime | None, now: datetime | None = None) -> str:
    """Format a point in time relative to ``now`` ("3 hours ago").

    Uses the largest whole unit, the same way humanized durations read in the
    AWS console. Future timestamps (clock skew) read as "just now".
    """
    if value is None:
        return EMPTY_VALUE
    current = _as_aware(now or datetime.now(timezone.utc))
    seconds = int((current - _as_aware(value)).total_seconds())
    if seconds < 1:
        return "just now"
    for unit, unit_seconds in _TIME_UNITS:
        amount = seconds // unit_seconds
        if amount >= 1:
            suffix = "" if amount == 1 else "s"
            return f"{amount} {unit}{suffix} ago"
    return "just now"


def _with_millis(value: datetime, fmt: str) -> str:
    return f"{value.strftime(fmt)}.{value.microsecond // 1000:03d}"


def format_last_update(value: datetime | None) -> str:
    """Format the footer timestamp as ``HH:MM:SS.mmm`` in local time."""
    if value is None:
        return EMPTY_VALUE
    return _with_millis(value, LAST_UPDATE_FORMAT)


def format_event_timestamp(value: datetime | None) -> str:
    """Format an event timestamp as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    if value is None:
        return EMPTY_VALUE
    return _with_millis(value, EVENT_TIMESTAMP_FORMAT)


def availability_zone_suffix(zone: str | None) -> str:
    """Return the short zone suffix (``me-central-1a`` -> ``1a``)."""
    if not zone:
        return ""
    return zone.rsplit("-", 1)[-1]


__all__ = [
    "availability_zone_suffix",
    "format_event_timestamp",
    "format_last_update",
    "format_relative_time",
]
