"""Daily mood of a companion character, independent of any chat text.

The mood is a score in [-100, 100] built from a neutral base of 50 plus
factors: a 28-day cycle for girlfriend characters, the season, the weather
and, sometimes, a small random daily event.
"""
from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .transition import RandomSource

logger = logging.getLogger(__name__)

BASE_MOOD = 50
MOOD_MIN, MOOD_MAX = -100, 100
CYCLE_LENGTH = 28
RANDOM_FACTOR_CHANCE = 0.3
CYCLING_KIND = "girlfriend"

WEATHERS = (
    ("晴天", 8),
    ("曇り", -3),
    ("雨", -8),
    ("雪", 5),
    ("風が強い", -5),
)

DAILY_EVENTS = (
    ("友達からの連絡", 8),
    ("好きな歌を聞いた", 6),
    ("美味しいものを食べた", 7),
    ("電車の遅延", -6),
    ("ちょっとした失敗", -4),
    ("良いニュースを見た", 5),
    ("疲れがたまっている", -8),
    ("新しい発見があった", 6),
)


@dataclass(frozen=True)
class MoodFactor:
    kind: str
    influence: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MoodState:
    current_mood: int
    last_mood_change: datetime
    cycle_day: Optional[int] = None
    factors: List[MoodFactor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_mood": self.current_mood,
            "last_mood_change": self.last_mood_change.isoformat(),
            "cycle_day": self.cycle_day,
            "factors": [f.to_dict() for f in self.factors],
        }


def cycle_day(cycle_start: datetime, now: datetime) -> int:
    """1-based day within the 28-day cycle that began at cycle_start."""
    days = (now - cycle_start).days
    return days % CYCLE_LENGTH + 1


def cycle_adjustment(day: int) -> int:
    if 1 <= day <= 5:
        return -15
    if 6 <= day <= 13:
        return 10
    if 14 <= day <= 16:
        return 5
    if 17 <= day <= 24:
        return 0
    if 25 <= day <= 28:
        return -10
    return 0


def seasonal_factor(now: datetime) -> MoodFactor:
    month = now.month
    if 3 <= month <= 5:
        return MoodFactor("season", 5, "春の暖かさ")
    if 6 <= month <= 8:
        return MoodFactor("season", -5, "夏の暑さ")
    if 9 <= month <= 11:
        return MoodFactor("season", 3, "秋の心地よさ")
    return MoodFactor("season", -8, "冬の寒さ")


def _pick(rng: RandomSource, options) -> tuple:
    return options[int(rng.random() * len(options)) % len(options)]


def weather_factor(rng: RandomSource) -> MoodFactor:
    description, influence = _pick(rng, WEATHERS)
    return MoodFactor("weather", influence, description)


def daily_event_factor(rng: RandomSource) -> MoodFactor:
    description, influence = _pick(rng, DAILY_EVENTS)
    return MoodFactor("random", influence, description)


def calculate_current_mood(
    character_kind: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
    cycle_start: Optional[datetime] = None,
    rng: Optional[RandomSource] = None,
) -> MoodState:
    """Compute today's mood for a character.

    `cycle_start` only matters for girlfriend characters; when omitted the
    cycle is taken to start today. `rng` drives weather and daily events.
    """
    now = now or datetime.now()
    rng = rng or random.Random()
    factors: List[MoodFactor] = []
    mood = BASE_MOOD

    day = None
    if character_kind == CYCLING_KIND:
        day = cycle_day(cycle_start or now, now)
        adjustment = cycle_adjustment(day)
        factors.append(MoodFactor("cycle", adjustment, f"生理周期 ({day}日目)"))

    factors.append(seasonal_factor(now))
    factors.append(weather_factor(rng))
    if rng.random() < RANDOM_FACTOR_CHANCE:
        factors.append(daily_event_factor(rng))

    mood += sum(f.influence for f in factors)
    mood = max(MOOD_MIN, min(MOOD_MAX, mood))
    logger.debug("mood for %s: %d from %d factors", character_kind, mood, len(factors))
    return MoodState(current_mood=mood, last_mood_change=now, cycle_day=day, factors=factors)


def mood_description(mood: int) -> str:
    if mood >= 70:
        return "絶好調♪"
    if mood >= 40:
        return "元気"
    if mood >= 10:
        return "普通"
    if mood >= -20:
        return "ちょっと疲れ気味"
    if mood >= -50:
        return "気分が下がってる"
    return "かなり落ち込んでる"


def mood_emoji(mood: int) -> str:
    if mood >= 70:
        return "😊"
    if mood >= 40:
        return "🙂"
    if mood >= 10:
        return "😐"
    if mood >= -20:
        return "😔"
    if mood >= -50:
        return "😞"
    return "😢"
