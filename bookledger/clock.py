from __future__ import annotations
from datetime import datetime, timedelta, tzinfo
from threading import Lock
from typing import Optional, Protocol


class Clock(Protocol):
    tz: tzinfo

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time in a fixed zone."""

    def __init__(self, tz: tzinfo) -> None:
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """
    Clock that only moves when told to. Used by tests and the demo to
    simulate the passage of days.
    """

    def __init__(self, start: datetime, tz: Optional[tzinfo] = None) -> None:
        if start.tzinfo is None:
            raise ValueError("FixedClock needs a timezone-aware start time")
        self.tz = tz or start.tzinfo
        self._now = start.astimezone(self.tz)
        self._lock = Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def set(self, when: datetime) -> None:
        if when.tzinfo is None:
            raise ValueError("FixedClock needs a timezone-aware time")
        with self._lock:
            self._now = when.astimezone(self.tz)

    def advance(self, **delta: float) -> datetime:
        with self._lock:
            self._now = self._now + timedelta(**delta)
            return self._now
