"""Transition smoothing for the displayed emotion.

The displayed emotion should never flip between unrelated states in one step.
Moves to or from the baseline are always immediate, moves along the
compatibility graph are immediate, and anything else only gets through when
a random draw falls under the damping threshold.
"""
from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Protocol

from .config import EngineSettings, resolve
from .lexicon import BASELINE, EmotionCategory

logger = logging.getLogger(__name__)

E = EmotionCategory

COMPATIBILITY: Mapping[EmotionCategory, FrozenSet[EmotionCategory]] = MappingProxyType({
    E.HAPPY: frozenset({E.EXCITED, E.LOVE, E.NORMAL}),
    E.SAD: frozenset({E.WORRIED, E.NORMAL}),
    E.ANGRY: frozenset({E.SAD, E.NORMAL}),
    E.SURPRISED: frozenset({E.HAPPY, E.WORRIED, E.EXCITED}),
    E.LOVE: frozenset({E.HAPPY, E.SHY, E.NORMAL}),
    E.SHY: frozenset({E.LOVE, E.HAPPY, E.NORMAL}),
    E.EXCITED: frozenset({E.HAPPY, E.SURPRISED}),
    E.WORRIED: frozenset({E.SAD, E.NORMAL}),
})

assert set(COMPATIBILITY) == set(EmotionCategory) - {BASELINE}


class RandomSource(Protocol):
    def random(self) -> float: ...


def is_compatible(current: EmotionCategory, target: EmotionCategory) -> bool:
    """True when the graph allows current -> target without damping."""
    return target in COMPATIBILITY.get(current, frozenset())


def smooth(
    current: EmotionCategory,
    target: EmotionCategory,
    *,
    rng: Optional[RandomSource] = None,
    damping: Optional[float] = None,
) -> EmotionCategory:
    """Return the next displayed emotion given the current one and a proposal.

    Only the incompatible path consumes a random draw.
    """
    if target is current:
        return current
    if current is BASELINE or target is BASELINE:
        return target
    if is_compatible(current, target):
        return target

    threshold = resolve(None).damping_threshold if damping is None else damping
    draw = (rng or random.Random()).random()
    if draw < threshold:
        logger.debug("damped transition %s -> %s let through", current.value, target.value)
        return target

    logger.info("suppressed transition %s -> %s", current.value, target.value)
    return current


class TransitionSmoother:
    """`smooth` bound to one random source and damping threshold."""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.damping = resolve(settings).damping_threshold
        self.rng = rng if rng is not None else random.Random()

    def __call__(self, current: EmotionCategory, target: EmotionCategory) -> EmotionCategory:
        return smooth(current, target, rng=self.rng, damping=self.damping)
