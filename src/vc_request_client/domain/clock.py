"""Clock abstraction for flow timestamps"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Clock(ABC):
    """Source of the current time for flow bookkeeping"""

    @abstractmethod
    def now(self) -> datetime:
        """Get current time as timezone-aware UTC datetime"""
        pass


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Controllable clock used by tests and examples"""

    def __init__(self, fixed_time: datetime):
        self._current_time = _as_utc(fixed_time)

    def now(self) -> datetime:
        return self._current_time

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by delta"""
        self._current_time += delta
