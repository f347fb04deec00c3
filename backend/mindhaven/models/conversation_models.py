import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, Text, Integer, ForeignKey

from .base import Base

CONVERSATIONS_TABLE = "ai_assistant_conversations"


def new_conversation_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Naive UTC, matching what SQLite hands back
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AssistantConversation(Base):
    __tablename__ = CONVERSATIONS_TABLE
    
    id = Column(String(36), primary_key=True, default=new_conversation_id)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    message = Column(Text, nullable=False)
    response = Column(Text, nullable=False)
    emotion_detected = Column(String(20))  # enum value as text
    sentiment_score = Column(Float)
    created_at = Column(DateTime, default=utcnow, index=True)
