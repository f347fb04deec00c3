"""
Tests for the keyword lexicon and the emotion classifier.
"""

import pytest

from mindhaven.services.emotion_classifier import (
    DEFAULT_EMOJI,
    SENTIMENT_SCORES,
    ClassificationResult,
    classify,
    emotion_emoji,
    keyword_counts,
)
from mindhaven.services.emotion_lexicon import (
    KEYWORD_LEXICON,
    EmotionCategory,
    categories,
    lookup,
)


class TestLexicon:
    def test_every_category_has_keywords(self):
        for category in EmotionCategory:
            assert len(lookup(category)) > 0

    def test_category_order_is_fixed(self):
        assert [c.value for c in categories()] == [
            "happy", "sad", "angry", "anxious", "confused", "neutral", "crisis",
        ]

    def test_lookup_accepts_string_value(self):
        assert lookup("crisis") == KEYWORD_LEXICON[EmotionCategory.CRISIS]
        assert "want to die" in lookup("crisis")

    def test_lookup_unknown_category_raises(self):
        with pytest.raises(ValueError):
            lookup("bored")

    def test_lexicon_is_read_only(self):
        with pytest.raises(TypeError):
            KEYWORD_LEXICON[EmotionCategory.HAPPY] = ("yay",)

    def test_keywords_are_lowercase(self):
        for keywords in KEYWORD_LEXICON.values():
            for keyword in keywords:
                assert keyword == keyword.lower()


class TestClassify:
    @pytest.mark.parametrize("message", [
        "Tell me about the weather",
        "What time is the bus?",
        "Hello there",
    ])
    def test_no_keywords_is_neutral(self, message):
        result = classify(message)
        assert result.emotion == EmotionCategory.NEUTRAL
        assert result.sentiment_score == 0.0

    def test_empty_and_none_are_neutral(self):
        assert classify("") == ClassificationResult(EmotionCategory.NEUTRAL, 0.0)
        assert classify(None) == ClassificationResult(EmotionCategory.NEUTRAL, 0.0)

    def test_happy_message(self):
        result = classify("I am so happy and excited today!")
        assert result.emotion == EmotionCategory.HAPPY
        assert result.sentiment_score == 0.8

    def test_anxious_message(self):
        result = classify("I feel so anxious and overwhelmed about everything")
        assert result.emotion == EmotionCategory.ANXIOUS
        assert result.sentiment_score == -0.5

    def test_crisis_message(self):
        result = classify("sometimes I just want to die")
        assert result.emotion == EmotionCategory.CRISIS
        assert result.sentiment_score == -1.0

    def test_matching_is_case_insensitive(self):
        result = classify("I AM FURIOUS")
        assert result.emotion == EmotionCategory.ANGRY
        assert result.sentiment_score == -0.9

    def test_substring_matches_inside_words(self):
        # "mad" is found inside "madrigal"
        assert classify("I love madrigal music").emotion == EmotionCategory.ANGRY

    def test_repeated_keyword_counts_once(self):
        counts = keyword_counts("sad sad sad happy")
        assert counts[EmotionCategory.SAD] == 1
        assert counts[EmotionCategory.HAPPY] == 1
        # Tie goes to the category listed first
        assert classify("sad sad sad happy").emotion == EmotionCategory.HAPPY

    def test_sad_wins_tie_with_crisis_by_default(self):
        result = classify("I am sad and want to kill")
        assert result.emotion == EmotionCategory.SAD
        assert result.sentiment_score == -0.7

    def test_higher_count_beats_crisis_by_default(self):
        message = "I'm sad, depressed and hopeless, I could kill"
        assert keyword_counts(message)[EmotionCategory.SAD] == 3
        assert classify(message).emotion == EmotionCategory.SAD

    def test_crisis_priority_overrides_counts(self):
        assert classify("I am sad and want to kill", crisis_priority=True).emotion == EmotionCategory.CRISIS
        result = classify("I'm sad, depressed and hopeless, I could kill", crisis_priority=True)
        assert result.emotion == EmotionCategory.CRISIS
        assert result.sentiment_score == -1.0

    def test_crisis_priority_without_crisis_keywords_is_unchanged(self):
        assert classify("I am so happy", crisis_priority=True).emotion == EmotionCategory.HAPPY

    def test_keyword_counts_cover_all_categories(self):
        assert set(keyword_counts("anything")) == set(EmotionCategory)

    def test_scores_are_in_range(self):
        for category in EmotionCategory:
            assert -1.0 <= SENTIMENT_SCORES[category] <= 1.0

    def test_deterministic(self):
        message = "I'm worried and confused"
        assert classify(message) == classify(message)


class TestEmotionEmoji:
    def test_known_emotions(self):
        assert emotion_emoji(EmotionCategory.HAPPY) == "😊"
        assert emotion_emoji("crisis") == "⚠️"

    def test_unknown_emotion(self):
        assert emotion_emoji("bored") == DEFAULT_EMOJI
        assert emotion_emoji(None) == DEFAULT_EMOJI
