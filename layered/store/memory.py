"""In-memory UserStorage implementation for testing and prototyping."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable

from layered.core.errors import UserNotFoundError
from layered.core.types import Name, User

logger = logging.getLogger(__name__)


class MemoryUserStorage:
    """Thread-unsafe, in-memory UserStorage keyed by Name."""

    def __init__(self) -> None:
        self._users: dict[Name, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, name: object) -> bool:
        return name in self._users

    def read(self, name: Name) -> User:
        user = self._users.get(name)
        if user is None:
            logger.debug("No user stored under %s", name)
            raise UserNotFoundError(name)
        return copy.deepcopy(user)

    def save(self, name: Name, user: User) -> None:
        self._users[name] = copy.deepcopy(user)
        logger.debug("Saved user %s", name)

    def read_all(self) -> list[User]:
        return [copy.deepcopy(self._users[name]) for name in sorted(self._users)]

    def save_all(self, users: Iterable[tuple[Name, User]]) -> None:
        count = 0
        for name, user in users:
            self._users[name] = copy.deepcopy(user)
            count += 1
        logger.debug("Saved %d users in bulk", count)
