"""Environment-driven configuration shared by the runtime services."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "VIM_DRILL_"

DEFAULT_MAX_COUNT = 99
DEFAULT_TARGET_MIN_DISTANCE = 3


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    raw = env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class DrillSettings:
    """Tunables for the parser and the exercise tracker.

    ``max_count`` caps the numeric prefix typed before a command and
    ``target_min_distance`` is the Manhattan distance a generated motion
    target keeps from the cursor.
    """

    max_count: int = DEFAULT_MAX_COUNT
    target_min_distance: int = DEFAULT_TARGET_MIN_DISTANCE

    def __post_init__(self) -> None:
        if self.max_count < 1:
            raise ValueError("max_count must be at least 1")
        if self.target_min_distance < 0:
            raise ValueError("target_min_distance cannot be negative")

    @classmethod
    def from_env(cls) -> "DrillSettings":
        return cls(
            max_count=env_int("MAX_COUNT", DEFAULT_MAX_COUNT),
            target_min_distance=env_int(
                "TARGET_MIN_DISTANCE", DEFAULT_TARGET_MIN_DISTANCE
            ),
        )


__all__ = [
    "ENV_PREFIX",
    "DrillSettings",
    "env",
    "env_flag",
    "env_int",
]
