"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime."""
    return datetime.now(tz=timezone.utc)


def utc_timestamp() -> str:
    """ISO-8601 timestamp with millisecond precision and a ``Z`` suffix."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    """Current UTC date as ``YYYY-MM-DD``."""
    return utc_now().date().isoformat()
