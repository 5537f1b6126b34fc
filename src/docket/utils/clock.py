"""Time authority used by every timestamp and "upcoming" comparison."""

from datetime import datetime, timedelta, timezone
from typing import Optional


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SystemClock:
    """Wall clock of the running process."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant until moved explicitly."""

    def __init__(self, instant: Optional[datetime] = None):
        self._instant = as_utc(instant or datetime(2025, 1, 1, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = as_utc(instant)

    def advance(self, **kwargs) -> datetime:
        self._instant = self._instant + timedelta(**kwargs)
        return self._instant


__all__ = ["as_utc", "SystemClock", "FixedClock"]
