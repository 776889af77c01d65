# companion_emotion/lexicon.py
# Closed emotion categories and the static trigger lexicon.
#
# Triggers carry no numeric weight. The scorer derives weight from trigger
# length, so longer phrases count for more than short tokens, emoji or
# punctuation. Category order below is the tie-break order.

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from .errors import InvalidPayloadError


class EmotionCategory(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    SURPRISED = "surprised"
    ANGRY = "angry"
    LOVE = "love"
    SHY = "shy"
    EXCITED = "excited"
    WORRIED = "worried"
    NORMAL = "normal"

    @classmethod
    def parse(cls, value: Union[str, "EmotionCategory"]) -> "EmotionCategory":
        """Convert a caller-supplied name into a category.

        Raises InvalidPayloadError for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidPayloadError(f"Unknown emotion category: {value!r}")


BASELINE = EmotionCategory.NORMAL
BASELINE_INTENSITY = 50


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @classmethod
    def from_hour(cls, hour: int) -> "TimeOfDay":
        if 5 <= hour < 12:
            return cls.MORNING
        if 12 <= hour < 17:
            return cls.AFTERNOON
        if 17 <= hour < 22:
            return cls.EVENING
        return cls.NIGHT

    @classmethod
    def parse(cls, value: Union[str, "TimeOfDay"]) -> "TimeOfDay":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidPayloadError(f"Unknown time of day: {value!r}")


_LEXICON = {
    EmotionCategory.HAPPY: (
        "嬉しい", "うれしい", "楽しい", "たのしい", "やったー", "最高", "さいこう",
        "ありがとう", "わーい", "イェーイ", "ラッキー", "幸せ", "しあわせ",
        "😊", "😃", "😄", "😁", "🎉", "✨", "🌟",
    ),
    EmotionCategory.LOVE: (
        "好き", "すき", "愛してる", "あいしてる", "大好き", "だいすき", "ラブ",
        "かわいい", "素敵", "すてき", "ドキドキ", "会いたい", "あいたい",
        "💕", "❤️", "💗", "💖", "😍", "🥰", "💝",
    ),
    EmotionCategory.SAD: (
        "悲しい", "かなしい", "つらい", "辛い", "寂しい", "さみしい", "さびしい",
        "泣", "ごめん", "すまん", "残念", "ざんねん", "ショック",
        "😢", "😭", "😔", "😞", "💔", "😿",
    ),
    EmotionCategory.ANGRY: (
        "怒", "むかつく", "ムカつく", "イライラ", "いらいら", "もう", "ふざけ",
        "許さない", "ゆるさない", "最悪", "さいあく", "ダメ", "だめ",
        "💢", "😠", "😡", "🤬", "😤", "👿",
    ),
    EmotionCategory.SURPRISED: (
        "えっ", "え？", "まじ", "マジ", "本当に？", "ほんとに？",
        "びっくり", "ビックリ", "驚", "すごい", "スゴイ", "信じられない",
        "😲", "😱", "🤯", "😮", "‼️", "⁉️",
    ),
    EmotionCategory.SHY: (
        "恥ずかしい", "はずかしい", "照れ", "てれ", "えへへ", "もじもじ",
        "ドキドキ", "どきどき", "////", "キャー", "きゃー",
        "😳", "😊", "☺️", "🤭", "💦",
    ),
    EmotionCategory.EXCITED: (
        "ワクワク", "わくわく", "楽しみ", "たのしみ", "テンション", "盛り上が",
        "やる気", "ヤル気", "頑張", "がんば", "ファイト",
        "🔥", "💪", "✊", "🎯", "⚡", "🚀",
    ),
    EmotionCategory.WORRIED: (
        "心配", "しんぱい", "不安", "ふあん", "大丈夫", "だいじょうぶ",
        "困った", "こまった", "悩", "なや", "うーん",
        "😟", "😥", "😰", "🥺", "😨", "💭",
    ),
}

LEXICON: Mapping[EmotionCategory, Tuple[str, ...]] = MappingProxyType(_LEXICON)

assert BASELINE not in LEXICON
assert set(LEXICON) == set(EmotionCategory) - {BASELINE}
