"""UserStorage protocol."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from layered.core.types import Name, User


class UserStorage(Protocol):
    """Puts users into and takes them out of a backing store.

    ``read`` raises :class:`~layered.core.errors.UserNotFoundError` for an
    unknown name. Backends doing real I/O raise
    :class:`~layered.core.errors.StorageError` on failure.
    """

    def read(self, name: Name) -> User: ...

    def save(self, name: Name, user: User) -> None: ...

    def read_all(self) -> list[User]: ...

    def save_all(self, users: Iterable[tuple[Name, User]]) -> None: ...
