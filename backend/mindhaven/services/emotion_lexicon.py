"""Static keyword lexicon used by the emotion classifier.

Keywords are lowercase and matched as plain substrings of the lowercased
message, so ``"mad"`` also fires inside ``"madrigal"``.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class EmotionCategory(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    ANXIOUS = "anxious"
    CONFUSED = "confused"
    NEUTRAL = "neutral"
    CRISIS = "crisis"


# Insertion order is the classifier's tie-break order.
KEYWORD_LEXICON: Mapping[EmotionCategory, Tuple[str, ...]] = MappingProxyType({
    EmotionCategory.HAPPY: (
        "happy", "joy", "excited", "great", "wonderful", "fantastic", "glad",
        "pleased", "delighted", "content", "cheerful", "thrilled",
    ),
    EmotionCategory.SAD: (
        "sad", "unhappy", "depressed", "down", "miserable", "heartbroken",
        "upset", "disappointed", "gloomy", "hopeless", "grief", "sorrow",
    ),
    EmotionCategory.ANGRY: (
        "angry", "mad", "furious", "annoyed", "irritated", "frustrated",
        "outraged", "enraged", "hostile", "bitter", "hate", "resent",
    ),
    EmotionCategory.ANXIOUS: (
        "anxious", "worried", "nervous", "stressed", "tense", "uneasy",
        "afraid", "scared", "fearful", "panicked", "overwhelmed", "concerned",
    ),
    EmotionCategory.CONFUSED: (
        "confused", "unsure", "uncertain", "puzzled", "perplexed", "lost",
        "disoriented", "bewildered", "doubtful", "hesitant", "unclear",
    ),
    EmotionCategory.NEUTRAL: (
        "ok", "fine", "alright", "neutral", "average", "moderate", "so-so",
        "mediocre",
    ),
    EmotionCategory.CRISIS: (
        "die", "death", "suicide", "kill", "end my life", "hurt myself",
        "self harm", "harm myself", "wanna die", "want to die",
    ),
})


def lookup(category) -> Tuple[str, ...]:
    """Return the keywords for ``category`` (enum member or its string value)."""
    return KEYWORD_LEXICON[EmotionCategory(category)]


def categories() -> Tuple[EmotionCategory, ...]:
    return tuple(KEYWORD_LEXICON.keys())
