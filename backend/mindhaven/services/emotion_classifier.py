"""Keyword-count emotion classifier for chat messages."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .emotion_lexicon import EmotionCategory, KEYWORD_LEXICON

SENTIMENT_SCORES: Mapping[EmotionCategory, float] = MappingProxyType({
    EmotionCategory.HAPPY: 0.8,
    EmotionCategory.SAD: -0.7,
    EmotionCategory.ANGRY: -0.9,
    EmotionCategory.ANXIOUS: -0.5,
    EmotionCategory.CONFUSED: -0.2,
    EmotionCategory.NEUTRAL: 0.0,
    EmotionCategory.CRISIS: -1.0,
})

EMOTION_EMOJI: Mapping[str, str] = MappingProxyType({
    "happy": "😊",
    "sad": "😔",
    "angry": "😠",
    "anxious": "😰",
    "confused": "😕",
    "neutral": "😌",
    "crisis": "⚠️",
})
DEFAULT_EMOJI = "🤖"


@dataclass(frozen=True)
class ClassificationResult:
    emotion: EmotionCategory
    sentiment_score: float


def keyword_counts(message: Optional[str]) -> Dict[EmotionCategory, int]:
    """Number of distinct keywords of each category found in ``message``."""
    text = (message or "").lower()
    return {
        category: sum(1 for keyword in keywords if keyword in text)
        for category, keywords in KEYWORD_LEXICON.items()
    }


def classify(message: Optional[str], crisis_priority: bool = False) -> ClassificationResult:
    """Classify ``message`` into one emotion and its fixed sentiment score.

    The category with the strictly highest keyword count wins; on a tie the
    category that comes first in the lexicon keeps the lead, and a message
    with no matches at all is neutral. So a message with one ``sad`` and one
    ``crisis`` keyword is classified ``sad``.

    With ``crisis_priority`` any crisis keyword match wins outright.
    """
    counts = keyword_counts(message)

    if crisis_priority and counts[EmotionCategory.CRISIS] > 0:
        dominant = EmotionCategory.CRISIS
    else:
        dominant = EmotionCategory.NEUTRAL
        max_count = 0
        for category, count in counts.items():
            if count > max_count:
                max_count = count
                dominant = category

    return ClassificationResult(emotion=dominant, sentiment_score=SENTIMENT_SCORES[dominant])


def emotion_emoji(emotion) -> str:
    value = emotion.value if isinstance(emotion, EmotionCategory) else str(emotion)
    return EMOTION_EMOJI.get(value, DEFAULT_EMOJI)
