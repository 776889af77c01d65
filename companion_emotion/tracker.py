"""Per-session holder of the displayed emotion.

A tracker is created by the caller for one conversation and fed each new
message in arrival order. It is not thread-safe: concurrent updates for the
same session must be serialized by the host.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .config import EngineSettings, resolve
from .context import infer_from_context
from .detector import score
from .lexicon import BASELINE, BASELINE_INTENSITY, EmotionCategory
from .transition import RandomSource, TransitionSmoother

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmotionUpdate:
    emotion: EmotionCategory
    intensity: int
    proposed: EmotionCategory
    hold_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emotion": self.emotion.value,
            "intensity": self.intensity,
            "proposed": self.proposed.value,
            "hold_ms": self.hold_ms,
        }


class EmotionTracker:
    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.settings = resolve(settings)
        self._smoother = TransitionSmoother(self.settings, rng)
        self.current: EmotionCategory = BASELINE
        self.intensity: int = BASELINE_INTENSITY

    def hold_ms(self, intensity: int) -> int:
        """How long the caller should show an emotion before decaying to baseline."""
        return self.settings.base_hold_ms + intensity * self.settings.hold_ms_per_intensity

    def observe(self, message: str, previous_messages: Sequence[str] = ()) -> EmotionUpdate:
        """Classify a new message and advance the displayed emotion."""
        result = score(message)
        if result.emotion is not BASELINE:
            proposed = result.emotion
        else:
            proposed = infer_from_context(message, previous_messages, settings=self.settings)

        self.current = self._smoother(self.current, proposed)
        self.intensity = result.intensity
        update = EmotionUpdate(self.current, self.intensity, proposed, self.hold_ms(self.intensity))
        logger.debug("tracker update: %s", update)
        return update

    def reset(self) -> None:
        self.current = BASELINE
        self.intensity = BASELINE_INTENSITY
