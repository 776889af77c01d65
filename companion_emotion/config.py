"""Policy constants for the engine, overridable through the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

DEFAULT_DAMPING_THRESHOLD = 0.3
DEFAULT_CONTEXT_WINDOW = 3
DEFAULT_BASE_HOLD_MS = 3000
DEFAULT_HOLD_MS_PER_INTENSITY = 50


def _env(name: str, cast: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} has an invalid value: {raw!r}") from exc


@dataclass(frozen=True)
class EngineSettings:
    """Tunable policy for context inference, smoothing and display hold time.

    damping_threshold: probability that an incompatible transition is let through.
    context_window: how many prior messages the context inferrer looks at.
    base_hold_ms / hold_ms_per_intensity: how long a caller should keep a
        non-baseline emotion on screen before decaying back to normal.
    """

    damping_threshold: float = DEFAULT_DAMPING_THRESHOLD
    context_window: int = DEFAULT_CONTEXT_WINDOW
    base_hold_ms: int = DEFAULT_BASE_HOLD_MS
    hold_ms_per_intensity: int = DEFAULT_HOLD_MS_PER_INTENSITY

    def __post_init__(self) -> None:
        if not 0.0 <= self.damping_threshold <= 1.0:
            raise ConfigurationError("damping_threshold must be within [0, 1]")
        if self.context_window < 0:
            raise ConfigurationError("context_window must not be negative")
        if self.base_hold_ms < 0 or self.hold_ms_per_intensity < 0:
            raise ConfigurationError("hold times must not be negative")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            damping_threshold=_env("EMOTION_DAMPING_THRESHOLD", float, DEFAULT_DAMPING_THRESHOLD),
            context_window=_env("EMOTION_CONTEXT_WINDOW", int, DEFAULT_CONTEXT_WINDOW),
            base_hold_ms=_env("EMOTION_BASE_HOLD_MS", int, DEFAULT_BASE_HOLD_MS),
            hold_ms_per_intensity=_env(
                "EMOTION_HOLD_MS_PER_INTENSITY", int, DEFAULT_HOLD_MS_PER_INTENSITY
            ),
        )


DEFAULT_SETTINGS = EngineSettings()


def resolve(settings: Optional[EngineSettings]) -> EngineSettings:
    return settings if settings is not None else DEFAULT_SETTINGS
