"""
Tests for reply generation.
"""

import pytest

from mindhaven.services.emotion_lexicon import EmotionCategory
from mindhaven.services.response_generator import (
    CRISIS_RESPONSE,
    generate,
)


def test_greets_by_name():
    reply = generate("I am so happy and excited today!", EmotionCategory.HAPPY, "Sam")
    assert reply.startswith("Hi Sam")
    assert "I'd love to hear more" in reply


@pytest.mark.parametrize("display_name", [None, "", "   "])
def test_generic_greeting_without_name(display_name):
    assert generate("hello", "neutral", display_name).startswith("Hi there")


def test_anxious_reply_suggests_breathing():
    reply = generate("I feel so anxious", "anxious", None)
    assert "deep breaths" in reply


@pytest.mark.parametrize("display_name", ["Sam", None, "Alex"])
def test_crisis_reply_is_fixed_and_unpersonalized(display_name):
    reply = generate("sometimes I just want to die", EmotionCategory.CRISIS, display_name)
    assert reply == CRISIS_RESPONSE
    assert "988" in reply
    assert "741741" in reply
    assert "text HOME to 741741" in reply
    assert not reply.startswith("Hi")
    if display_name:
        assert display_name not in reply


def test_crisis_reply_contents():
    assert "concerned" in CRISIS_RESPONSE
    assert "mental health professional right away" in CRISIS_RESPONSE
    assert CRISIS_RESPONSE.endswith("You matter, and help is available.")


@pytest.mark.parametrize("emotion", ["happy", "sad", "angry", "anxious", "confused", "neutral"])
def test_non_crisis_replies_keep_greeting(emotion):
    assert generate("msg", emotion, "Jo").startswith("Hi Jo")


def test_enum_and_string_give_same_reply():
    assert generate("m", EmotionCategory.SAD, "Jo") == generate("m", "sad", "Jo")


@pytest.mark.parametrize("emotion", ["bored", "", None, 42, "CRISIS "])
def test_unusual_emotions_never_raise(emotion):
    reply = generate(None, emotion, None)
    assert isinstance(reply, str)
    assert reply


def test_unknown_emotion_uses_default_template():
    reply = generate("msg", "bored", "Sam")
    assert reply.startswith("Hi Sam!")
    assert "I'm your Emotion AI Assistant" in reply


def test_non_string_display_name_is_ignored():
    assert generate("msg", "happy", 123).startswith("Hi there")


def test_generate_is_deterministic():
    assert generate("msg", "confused", "Sam") == generate("msg", "confused", "Sam")
