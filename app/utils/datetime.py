"""Helpers for working with the UTC timestamps stored in MongoDB."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime.

    BSON dates have millisecond precision, so microseconds are truncated to
    keep in-memory values equal to what the server hands back.
    """

    now = datetime.now(tz=timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` to an aware UTC datetime.

    pymongo returns naive datetimes (already in UTC) unless the client was
    created with ``tz_aware=True``.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
