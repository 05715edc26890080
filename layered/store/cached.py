"""Read-through caching wrapper around any UserStorage."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable

from layered.core.types import Name, User
from layered.store.base import UserStorage

logger = logging.getLogger(__name__)


class CachedUserStorage:
    """UserStorage that caches reads from a wrapped backend.

    ``read`` fills the cache. ``save`` and ``save_all`` drop the entry of
    every name they write before delegating, so the cache never outlives
    a write to the same key. The cache is unbounded.
    """

    def __init__(self, backend: UserStorage) -> None:
        self._backend = backend
        self._cache: dict[Name, User] = {}

    @property
    def backend(self) -> UserStorage:
        return self._backend

    def __len__(self) -> int:
        return len(self._backend)

    def __contains__(self, name: object) -> bool:
        return name in self._backend

    def _invalidate(self, name: Name) -> None:
        if self._cache.pop(name, None) is not None:
            logger.debug("Invalidated cache entry for %s", name)

    def read(self, name: Name) -> User:
        cached = self._cache.get(name)
        if cached is not None:
            logger.debug("Cache hit for %s", name)
            return copy.deepcopy(cached)
        logger.debug("Cache miss for %s", name)
        user = self._backend.read(name)
        self._cache[name] = copy.deepcopy(user)
        return user

    def save(self, name: Name, user: User) -> None:
        # Dropped before saving: a failed save must not leave a stale entry.
        self._invalidate(name)
        self._backend.save(name, user)

    def read_all(self) -> list[User]:
        return self._backend.read_all()

    def save_all(self, users: Iterable[tuple[Name, User]]) -> None:
        entries = list(users)
        for name, _ in entries:
            self._invalidate(name)
        self._backend.save_all(entries)

    def cached_names(self) -> list[Name]:
        return sorted(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()
