"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from layered.core.clock import FixedClock
from layered.core.errors import StorageError
from layered.core.types import Name, User
from layered.env import TestWorld
from layered.store.memory import MemoryUserStorage

T0 = datetime.fromisoformat("2018-08-20T10:00:00+09:00")


class BrokenStorage:
    """UserStorage whose backend is always down."""

    def read(self, name: Name) -> User:
        raise StorageError("read failed")

    def save(self, name: Name, user: User) -> None:
        raise StorageError("save failed")

    def read_all(self) -> list[User]:
        raise StorageError("read_all failed")

    def save_all(self, users) -> None:
        raise StorageError("save_all failed")


class CountingStorage(MemoryUserStorage):
    """MemoryUserStorage that counts reads."""

    def __init__(self) -> None:
        super().__init__()
        self.reads = 0

    def read(self, name: Name) -> User:
        self.reads += 1
        return super().read(name)


class TickingClock:
    """Clock that advances one hour per call."""

    def __init__(self, start: datetime = T0):
        self._current = start
        self.calls = 0

    def now(self) -> datetime:
        ts = self._current
        self._current = ts + timedelta(hours=1)
        self.calls += 1
        return ts


@pytest.fixture
def memory_storage():
    return MemoryUserStorage()


@pytest.fixture
def fixed_clock():
    return FixedClock(T0)


@pytest.fixture
def test_world():
    return TestWorld()
