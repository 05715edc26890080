"""Environment configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ClockConfig:
    fixed_time: str | None = None  # ISO-8601; None means the system clock


@dataclass
class CacheConfig:
    enabled: bool = False


@dataclass
class EnvironmentConfig:
    clock: ClockConfig = field(default_factory=ClockConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
