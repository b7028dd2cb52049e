"""Helpers for timezone-safe timestamp arithmetic."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime into timezone-aware UTC.

    Naive values (SQLite hands them back without tzinfo) are taken to be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_ago(days: int, now: datetime | None = None) -> datetime:
    """Return the UTC cutoff ``days`` whole days before ``now``."""
    reference = ensure_utc(now) if now is not None else utcnow()
    return reference - timedelta(days=days)


def age_in_days(created_at: datetime, now: datetime | None = None) -> int:
    """Return whole days elapsed since ``created_at``, clamped at zero."""
    reference = ensure_utc(now) if now is not None else utcnow()
    elapsed = reference - ensure_utc(created_at)
    return max(0, elapsed.days)
