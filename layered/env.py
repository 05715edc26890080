"""Environments: composition roots wiring concrete capabilities together."""

from __future__ import annotations

import logging
from datetime import datetime

from layered.config import EnvironmentConfig
from layered.core.clock import DEFAULT_FIXED_TIME, Clock, FixedClock, SystemClock
from layered.core.types import Email, Name, User
from layered.repository.users import (
    CachedUserRepository,
    DefaultUserRepository,
    UserRepository,
)
from layered.store.base import UserStorage
from layered.store.memory import MemoryUserStorage

logger = logging.getLogger(__name__)


class Environment:
    """Owns one Clock and one UserStorage and the repository built on them.

    Repository operations can be invoked on the environment directly::

        env = RealWorld()
        env.insert(Name("user_a"), Email("user_a@example.com"))
        env.get(Name("user_a"))
    """

    def __init__(
        self,
        clock: Clock,
        storage: UserStorage,
        *,
        cache: bool = False,
    ) -> None:
        self._clock = clock
        repo_cls = CachedUserRepository if cache else DefaultUserRepository
        repository = repo_cls(storage, clock)
        self._repository: UserRepository = repository
        # Writes must reach the repository's view of storage, cache included.
        self._storage = repository.storage
        logger.debug(
            "Wired %s with %s and %s",
            repo_cls.__name__,
            type(clock).__name__,
            type(storage).__name__,
        )

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def user_storage(self) -> UserStorage:
        return self._storage

    @property
    def user_repository(self) -> UserRepository:
        return self._repository

    def get(self, name: Name) -> User:
        return self._repository.get(name)

    def insert(self, name: Name, email: Email) -> None:
        self._repository.insert(name, email)


class RealWorld(Environment):
    """Production environment: system clock, empty in-memory storage."""

    def __init__(self, *, cache: bool = False) -> None:
        super().__init__(SystemClock(), MemoryUserStorage(), cache=cache)


class TestWorld(Environment):
    """Test environment: fixed clock, empty in-memory storage."""

    __test__ = False

    def __init__(
        self, now: datetime = DEFAULT_FIXED_TIME, *, cache: bool = False
    ) -> None:
        super().__init__(FixedClock(now), MemoryUserStorage(), cache=cache)


def create_environment(config: EnvironmentConfig | None = None) -> Environment:
    """One-line factory building an environment from configuration."""
    config = config or EnvironmentConfig()
    if config.clock.fixed_time is not None:
        clock: Clock = FixedClock.from_iso(config.clock.fixed_time)
    else:
        clock = SystemClock()
    return Environment(clock, MemoryUserStorage(), cache=config.cache.enabled)
