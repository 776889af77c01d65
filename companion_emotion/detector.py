# companion_emotion/detector.py
# Lexical emotion scoring for chat messages.
# Public API:
#   score(text: str) -> ScoreResult               # dominant category + intensity
#   extract(text: str) -> frozenset                # every category that was hit
#   explain(text: str) -> Dict[str, Any]           # debug-friendly trace
#
# Pure standard library heuristics. Deterministic and side effect free.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet

from .lexicon import BASELINE, BASELINE_INTENSITY, LEXICON, EmotionCategory

logger = logging.getLogger(__name__)

LONG_TRIGGER_WEIGHT = 2
SHORT_TRIGGER_WEIGHT = 1
INTENSITY_PER_POINT = 20
MAX_INTENSITY = 100


# =============================================================================
# Data model
# =============================================================================

@dataclass(frozen=True)
class ScoreResult:
    emotion: EmotionCategory
    intensity: int

    def to_dict(self) -> Dict[str, Any]:
        return {"emotion": self.emotion.value, "intensity": self.intensity}


BASELINE_RESULT = ScoreResult(BASELINE, BASELINE_INTENSITY)


# =============================================================================
# Scoring
# =============================================================================

def _trigger_weight(trigger: str) -> int:
    return LONG_TRIGGER_WEIGHT if len(trigger) > 2 else SHORT_TRIGGER_WEIGHT


def category_scores(text: str) -> Dict[EmotionCategory, int]:
    """Weighted score per category, in lexicon order.

    Every non-overlapping occurrence of a trigger counts, so a repeated
    phrase or a run of doubled punctuation raises the score further.
    """
    text = text or ""
    scores: Dict[EmotionCategory, int] = {}
    for category, triggers in LEXICON.items():
        total = 0
        for trigger in triggers:
            hits = text.count(trigger)
            if hits:
                total += hits * _trigger_weight(trigger)
        scores[category] = total
    return scores


def score(text: str) -> ScoreResult:
    """Classify text into its dominant category and a 0-100 intensity.

    The first category to reach the strictly highest score wins. Text with no
    trigger at all resolves to the baseline at intensity 50.
    """
    best = BASELINE
    best_score = 0
    for category, value in category_scores(text).items():
        if value > best_score:
            best, best_score = category, value

    if best_score == 0:
        return BASELINE_RESULT

    result = ScoreResult(best, min(MAX_INTENSITY, best_score * INTENSITY_PER_POINT))
    logger.debug("scored %r as %s (%d)", text, result.emotion.value, result.intensity)
    return result


# =============================================================================
# Multi-emotion extraction
# =============================================================================

def hit_counts(text: str) -> Dict[EmotionCategory, int]:
    """Number of distinct triggers matched per category, without length weighting.

    Categories with no hit are left out.
    """
    text = text or ""
    counts: Dict[EmotionCategory, int] = {}
    for category, triggers in LEXICON.items():
        hits = sum(1 for trigger in triggers if trigger in text)
        if hits:
            counts[category] = hits
    return counts


def extract(text: str) -> FrozenSet[EmotionCategory]:
    """All categories detected in text. The baseline is never part of the set."""
    return frozenset(hit_counts(text))


def explain(text: str) -> Dict[str, Any]:
    """Trace of how a text was scored, for debugging and UI captions."""
    text = text or ""
    matched = {
        category.value: [t for t in triggers if t in text]
        for category, triggers in LEXICON.items()
    }
    return {
        "text": text,
        "scores": {c.value: v for c, v in category_scores(text).items()},
        "matched": {k: v for k, v in matched.items() if v},
        "result": score(text).to_dict(),
        "emotions": sorted(c.value for c in extract(text)),
    }
