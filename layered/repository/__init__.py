"""Repository layer."""

from layered.repository.users import (
    CachedUserRepository,
    DefaultUserRepository,
    UserRepository,
)

__all__ = ["UserRepository", "DefaultUserRepository", "CachedUserRepository"]
