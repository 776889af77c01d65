"""Conversation-aware resolution of ambiguous classifications.

`infer_from_context` lets recent messages colour a message that has no
emotional signal of its own. `contextualize` layers situational policy
(time of day, excitement cues) on top of that result. Neither ever replaces
a confident non-baseline classification.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from .config import EngineSettings, resolve
from .detector import score
from .lexicon import BASELINE, EmotionCategory, TimeOfDay

logger = logging.getLogger(__name__)

EXCITEMENT_MARKERS = ("やった", "よっしゃ", "キター", "きたー", "イエーイ", "いえーい")
EXCLAMATIONS = ("！", "!")
SLEEPINESS_MARKERS = ("眠い", "ねむい", "眠たい", "ねむたい", "眠く", "ねむく", "おやすみ")
ACTIVE_HOURS = frozenset({TimeOfDay.MORNING, TimeOfDay.AFTERNOON, TimeOfDay.EVENING})


def infer_from_context(
    current_text: str,
    previous_texts: Sequence[str] = (),
    *,
    window: Optional[int] = None,
    settings: Optional[EngineSettings] = None,
) -> EmotionCategory:
    """Resolve the emotion of current_text, borrowing momentum from prior messages.

    A non-baseline classification of the message itself is returned as is.
    Otherwise the last `window` prior messages are scanned: any happy one makes
    the result happy; failing that, any sad one reframes the message as worried.
    """
    own = score(current_text).emotion
    if own is not BASELINE:
        return own

    size = resolve(settings).context_window if window is None else window
    if size <= 0 or not previous_texts:
        return BASELINE

    recent = [score(text).emotion for text in list(previous_texts)[-size:]]
    if EmotionCategory.HAPPY in recent:
        logger.debug("neutral message lifted to happy by context")
        return EmotionCategory.HAPPY
    if EmotionCategory.SAD in recent:
        logger.debug("neutral message reframed as worried by sad context")
        return EmotionCategory.WORRIED
    return BASELINE


def _contains_any(text: str, markers: Sequence[str]) -> bool:
    return any(marker in text for marker in markers)


def contextualize(
    text: str,
    time_of_day: Union[TimeOfDay, str],
    previous_texts: Sequence[str] = (),
    *,
    settings: Optional[EngineSettings] = None,
) -> EmotionCategory:
    """Apply situational policy to a message that has no emotion of its own.

    The base is `infer_from_context`; a non-baseline base is returned as is.
    Sleepiness (眠い, おやすみ, ...) keeps the baseline in every time band.
    An excitement marker (やった, よっしゃ, ...) together with an exclamation
    mark escalates to excited in the morning, afternoon or evening, but not
    at night. Nothing else changes the baseline.
    """
    time_of_day = TimeOfDay.parse(time_of_day)
    base = infer_from_context(text, previous_texts, settings=settings)
    if base is not BASELINE:
        return base

    text = text or ""
    # Sleepiness stays neutral in every time band.
    if _contains_any(text, SLEEPINESS_MARKERS):
        return BASELINE

    if (
        time_of_day in ACTIVE_HOURS
        and _contains_any(text, EXCITEMENT_MARKERS)
        and _contains_any(text, EXCLAMATIONS)
    ):
        logger.debug("escalated to excited during %s", time_of_day.value)
        return EmotionCategory.EXCITED
    return BASELINE
