"""Canned supportive replies keyed by emotion."""
from typing import Optional

from .emotion_lexicon import EmotionCategory

CRISIS_RESPONSE = (
    "I'm really concerned about what you've shared. These thoughts are serious, "
    "and it's important you speak with a mental health professional right away. "
    "Please call the National Suicide Prevention Lifeline at 988 (or 1-800-273-8255), "
    "text HOME to 741741 to reach the Crisis Text Line, or go to your nearest "
    "emergency room. You matter, and help is available."
)

_RESPONSE_BODIES = {
    "happy": (
        "! It's wonderful to hear you're feeling positive! That's something to celebrate. "
        "What's bringing you joy today? I'd love to hear more about what's going well for you."
    ),
    "sad": (
        ", I notice you might be feeling down right now. That's completely okay - we all have "
        "moments like this. Would you like to talk more about what's troubling you? "
        "Sometimes sharing can help lighten the burden."
    ),
    "angry": (
        ", I can sense you might be feeling frustrated or upset. Those feelings are valid and "
        "important. Would it help to talk through what's bothering you? I'm here to listen "
        "without judgment."
    ),
    "anxious": (
        ", it sounds like you might be experiencing some worry or anxiety. That's a natural "
        "response to stress. Would it help to take a few deep breaths together? Remember that "
        "these feelings will pass, and you're not alone in this."
    ),
    "confused": (
        ", it seems like you might be feeling a bit uncertain right now. That's completely "
        "understandable. Sometimes things can be overwhelming or unclear. Would it help to "
        "break down what's on your mind?"
    ),
    "neutral": (
        "! How are you feeling today? I'm your Emotion AI Assistant, here to chat, offer "
        "support, or just listen. What's on your mind?"
    ),
}

_DEFAULT_BODY = (
    "! I'm your Emotion AI Assistant. I'm here to chat and provide support. "
    "How can I help you today?"
)


def _emotion_key(emotion) -> str:
    if isinstance(emotion, EmotionCategory):
        return emotion.value
    if isinstance(emotion, str):
        return emotion.strip().lower()
    return ""


def _greeting(display_name) -> str:
    name = display_name.strip() if isinstance(display_name, str) else ""
    return f"Hi {name}" if name else "Hi there"


def generate(message: Optional[str], emotion, display_name: Optional[str] = None) -> str:
    """Build the assistant's reply for a classified message.

    The crisis reply is fixed and never personalized. Every other reply starts
    with the greeting; unknown emotions get the generic introduction.
    ``message`` is accepted for interface stability but does not shape the reply.
    """
    key = _emotion_key(emotion)
    if key == EmotionCategory.CRISIS.value:
        return CRISIS_RESPONSE

    body = _RESPONSE_BODIES.get(key, _DEFAULT_BODY)
    return f"{_greeting(display_name)}{body}"
