"""Best-effort persistence of assistant conversations.

The chat reply is already computed by the time a record is written, so a
failed write is logged and reported through :class:`RecordResult` instead of
raising.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.exc import OperationalError, ProgrammingError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.conversation_models import (
    AssistantConversation,
    CONVERSATIONS_TABLE,
    new_conversation_id,
    utcnow,
)
from .emotion_classifier import ClassificationResult

logger = logging.getLogger("mindhaven.recorder")

PATH_ORM = "orm"
PATH_RAW_SQL = "raw_sql"

# Missing tables and columns surface as one of these.
SCHEMA_ERRORS = (OperationalError, ProgrammingError)

RAW_INSERT_SQL = text(
    f"INSERT INTO {CONVERSATIONS_TABLE} "
    "(id, user_id, message, response, emotion_detected, sentiment_score, created_at) "
    "VALUES (:id, :user_id, :message, :response, :emotion_detected, :sentiment_score, :created_at)"
).bindparams(bindparam("created_at", type_=DateTime))


@dataclass(frozen=True)
class RecordResult:
    success: bool
    record_id: Optional[str] = None
    path: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, record_id: str, path: str) -> "RecordResult":
        return cls(success=True, record_id=record_id, path=path)

    @classmethod
    def failed(cls, reason: str) -> "RecordResult":
        return cls(success=False, reason=reason)


def is_schema_error(error: Exception) -> bool:
    return isinstance(error, SCHEMA_ERRORS)


class ConversationRecorder:
    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        user_id: int,
        message: str,
        response: str,
        classification: ClassificationResult,
    ) -> RecordResult:
        """Persist one conversation, falling back to a raw insert on schema errors."""
        try:
            record_id = self._insert_orm(user_id, message, response, classification)
            return RecordResult.ok(record_id, PATH_ORM)
        except Exception as e:
            self._rollback()
            if not is_schema_error(e):
                logger.error("Error storing conversation for user %s: %s", user_id, e)
                return RecordResult.failed(f"{PATH_ORM}: {e.__class__.__name__}")
            logger.warning("Structured insert failed for user %s, trying raw SQL: %s", user_id, e)

        try:
            record_id = self._insert_raw(user_id, message, response, classification)
            return RecordResult.ok(record_id, PATH_RAW_SQL)
        except Exception as e:
            self._rollback()
            logger.error("Raw SQL insert failed for user %s, conversation not stored: %s", user_id, e)
            return RecordResult.failed(f"{PATH_RAW_SQL}: {e.__class__.__name__}")

    def _insert_orm(self, user_id: int, message: str, response: str, classification: ClassificationResult) -> str:
        db_record = AssistantConversation(
            user_id=user_id,
            message=message,
            response=response,
            emotion_detected=classification.emotion.value,
            sentiment_score=classification.sentiment_score,
        )
        self.db.add(db_record)
        self.db.commit()
        self.db.refresh(db_record)
        return db_record.id

    def _insert_raw(self, user_id: int, message: str, response: str, classification: ClassificationResult) -> str:
        record_id = new_conversation_id()
        self.db.execute(RAW_INSERT_SQL, {
            "id": record_id,
            "user_id": user_id,
            "message": message,
            "response": response,
            "emotion_detected": classification.emotion.value,
            "sentiment_score": classification.sentiment_score,
            "created_at": utcnow(),
        })
        self.db.commit()
        return record_id

    def _rollback(self):
        try:
            self.db.rollback()
        except SQLAlchemyError as e:
            logger.warning("Rollback after failed insert also failed: %s", e)
