"""Clock abstraction for injectable time source."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Default implementation: host local time, timezone-aware."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


DEFAULT_FIXED_TIME = datetime.fromisoformat("2018-08-20T10:00:00+09:00")


class FixedClock:
    """Clock that returns the same timestamp on every call."""

    def __init__(self, ts: datetime = DEFAULT_FIXED_TIME) -> None:
        self._ts = ts

    @classmethod
    def from_iso(cls, ts: str) -> FixedClock:
        return cls(datetime.fromisoformat(ts))

    def now(self) -> datetime:
        return self._ts
