"""Store module: user persistence."""

from layered.store.base import UserStorage
from layered.store.cached import CachedUserStorage
from layered.store.memory import MemoryUserStorage

__all__ = ["UserStorage", "CachedUserStorage", "MemoryUserStorage"]
