"""User entity and its value types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, order=True)
class Name:
    """Unique user identifier, used as the storage key."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Email:
    email: str

    def __str__(self) -> str:
        return self.email


@dataclass
class User:
    """A single account."""

    name: Name
    email: Email
    create_time: datetime
    update_time: datetime
