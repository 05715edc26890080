"""Exception hierarchy for layered."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layered.core.types import Name


class LayeredError(Exception):
    """Package base exception."""


class UserNotFoundError(LayeredError):
    """No user is stored under the requested name."""

    def __init__(self, name: Name) -> None:
        super().__init__(f"User {name!s} not found")
        self.name = name


class StorageError(LayeredError):
    """Underlying storage backend failed."""
