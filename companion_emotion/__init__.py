# companion_emotion/__init__.py
"""
Public package interface for companion_emotion.

Exports a stable API for hosting code: classification, context inference,
transition smoothing, the per-session tracker and the daily mood system.
"""

from __future__ import annotations

from .config import EngineSettings
from .context import contextualize, infer_from_context
from .detector import ScoreResult, category_scores, explain, extract, hit_counts, score
from .errors import ConfigurationError, InvalidPayloadError
from .formatter import format_mood, format_score
from .lexicon import LEXICON, EmotionCategory, TimeOfDay
from .mood import MoodFactor, MoodState, calculate_current_mood
from .tracker import EmotionTracker, EmotionUpdate
from .transition import COMPATIBILITY, TransitionSmoother, is_compatible, smooth

__all__ = [
    "COMPATIBILITY",
    "LEXICON",
    "ConfigurationError",
    "EmotionCategory",
    "EmotionTracker",
    "EmotionUpdate",
    "EngineSettings",
    "InvalidPayloadError",
    "MoodFactor",
    "MoodState",
    "ScoreResult",
    "TimeOfDay",
    "TransitionSmoother",
    "calculate_current_mood",
    "category_scores",
    "contextualize",
    "explain",
    "extract",
    "format_mood",
    "format_score",
    "hit_counts",
    "infer_from_context",
    "is_compatible",
    "score",
    "smooth",
]
