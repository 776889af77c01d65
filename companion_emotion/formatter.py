"""Output formatting helpers.

Converts engine results into JSON-ready dicts for the HTTP layer.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from .detector import ScoreResult
from .lexicon import EmotionCategory
from .mood import MoodState, mood_description, mood_emoji


def format_emotions(emotions: Iterable[EmotionCategory]) -> list:
    return sorted(e.value for e in emotions)


def format_score(
    result: ScoreResult,
    emotions: Iterable[EmotionCategory] = (),
    contextual: Optional[EmotionCategory] = None,
) -> Dict[str, Any]:
    """Shape of an analysis response.

    Example:
    {
        "emotion": "happy",
        "intensity": 80,
        "emotions": ["happy", "worried"],
        "contextual": "happy",
    }
    """
    data = result.to_dict()
    data["emotions"] = format_emotions(emotions)
    data["contextual"] = (contextual or result.emotion).value
    return data


def format_mood(state: MoodState) -> Dict[str, Any]:
    data = state.to_dict()
    data["description"] = mood_description(state.current_mood)
    data["emoji"] = mood_emoji(state.current_mood)
    return data
