"""layered: Cake Pattern style composition of a user repository."""

from layered.config import CacheConfig, ClockConfig, EnvironmentConfig
from layered.core.clock import Clock, FixedClock, SystemClock
from layered.core.errors import LayeredError, StorageError, UserNotFoundError
from layered.core.types import Email, Name, User
from layered.env import Environment, RealWorld, TestWorld, create_environment
from layered.repository.users import (
    CachedUserRepository,
    DefaultUserRepository,
    UserRepository,
)
from layered.store.base import UserStorage
from layered.store.cached import CachedUserStorage
from layered.store.memory import MemoryUserStorage

__all__ = [
    "CacheConfig",
    "CachedUserRepository",
    "CachedUserStorage",
    "Clock",
    "ClockConfig",
    "DefaultUserRepository",
    "Email",
    "Environment",
    "EnvironmentConfig",
    "FixedClock",
    "LayeredError",
    "MemoryUserStorage",
    "Name",
    "RealWorld",
    "StorageError",
    "SystemClock",
    "TestWorld",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserStorage",
    "create_environment",
]
