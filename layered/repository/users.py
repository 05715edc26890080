"""User repository: composes the storage and time capabilities."""

from __future__ import annotations

import logging
from typing import Protocol

from layered.core.clock import Clock
from layered.core.types import Email, Name, User
from layered.store.base import UserStorage
from layered.store.cached import CachedUserStorage

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    def get(self, name: Name) -> User: ...

    def insert(self, name: Name, email: Email) -> None: ...


class DefaultUserRepository:
    """UserRepository over any UserStorage and Clock.

    Typical usage::

        repo = DefaultUserRepository(MemoryUserStorage(), SystemClock())
        repo.insert(Name("user_a"), Email("user_a@example.com"))
        user = repo.get(Name("user_a"))
    """

    def __init__(self, storage: UserStorage, clock: Clock) -> None:
        self._storage = storage
        self._clock = clock

    @property
    def storage(self) -> UserStorage:
        return self._storage

    @property
    def clock(self) -> Clock:
        return self._clock

    def get(self, name: Name) -> User:
        return self._storage.read(name)

    def insert(self, name: Name, email: Email) -> None:
        """Create the user, overwriting any record stored under ``name``."""
        now = self._clock.now()
        user = User(name=name, email=email, create_time=now, update_time=now)
        self._storage.save(name, user)
        logger.debug("Inserted user %s at %s", name, now.isoformat())


class CachedUserRepository(DefaultUserRepository):
    """DefaultUserRepository reading through a :class:`CachedUserStorage`.

    The given storage is wrapped, and ``storage`` returns the wrapper, so
    writes made through it keep the cache coherent as well as ``insert``.
    """

    def __init__(self, storage: UserStorage, clock: Clock) -> None:
        self._cached_storage = CachedUserStorage(storage)
        super().__init__(self._cached_storage, clock)

    def cached_names(self) -> list[Name]:
        return self._cached_storage.cached_names()

    def clear_cache(self) -> None:
        self._cached_storage.clear_cache()
