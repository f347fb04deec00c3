"""Dashboard statistics over stored assistant conversations."""
from collections import Counter, defaultdict
from datetime import timedelta
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from ..models.conversation_models import AssistantConversation, utcnow
from ..models.user_models import User
from ..schemas.assistant_schemas import (
    ConcerningUser,
    ConversationRecordResponse,
    InsightSummary,
)
from .emotion_classifier import emotion_emoji

UNKNOWN_EMOTION = "unknown"


def to_record_response(conversation: AssistantConversation, display_name: Optional[str] = None) -> ConversationRecordResponse:
    emotion = conversation.emotion_detected or UNKNOWN_EMOTION
    return ConversationRecordResponse(
        id=conversation.id,
        user_id=conversation.user_id,
        display_name=display_name,
        message=conversation.message,
        response=conversation.response,
        emotion=emotion,
        emoji=emotion_emoji(emotion),
        sentiment_score=conversation.sentiment_score,
        created_at=conversation.created_at.isoformat() if conversation.created_at else None,
    )


def _mean(values: List[float]) -> float:
    return round(sum(values) / len(values), 2) if values else 0.0


def summarize_records(
    records: Iterable[ConversationRecordResponse],
    concerning_threshold: float = -0.4,
    concerning_limit: int = 5,
    recent_limit: int = 10,
    window_days: Optional[int] = None,
) -> InsightSummary:
    """Aggregate records that are already sorted newest first.

    Records without a sentiment score count toward the totals and the emotion
    distribution but not toward any average.
    """
    records = list(records)

    emotion_counts = Counter(record.emotion for record in records)

    scores_by_user = defaultdict(list)
    names = {}
    for record in records:
        names.setdefault(record.user_id, record.display_name)
        if record.sentiment_score is not None:
            scores_by_user[record.user_id].append(record.sentiment_score)

    all_scores = [score for scores in scores_by_user.values() for score in scores]

    concerning = [
        ConcerningUser(
            user_id=user_id,
            display_name=names.get(user_id),
            avg_sentiment=_mean(scores),
            conversation_count=len(scores),
        )
        for user_id, scores in scores_by_user.items()
        if sum(scores) / len(scores) < concerning_threshold
    ]
    concerning.sort(key=lambda user: (user.avg_sentiment, user.user_id))

    return InsightSummary(
        total_conversations=len(records),
        total_users=len({record.user_id for record in records}),
        average_sentiment=_mean(all_scores),
        emotion_distribution=dict(emotion_counts),
        concerning_users=concerning[:concerning_limit],
        recent_conversations=records[:recent_limit],
        window_days=window_days,
    )


class InsightAggregator:
    def __init__(self, db: Session):
        self.db = db

    def fetch_records(self, days: Optional[int] = None, limit: int = 100, user_id: Optional[int] = None) -> List[ConversationRecordResponse]:
        """Newest-first conversations joined with the sender's display name."""
        query = self.db.query(
            AssistantConversation, User.display_name, User.name
        ).outerjoin(
            User, User.id == AssistantConversation.user_id
        )

        if days:
            query = query.filter(AssistantConversation.created_at >= utcnow() - timedelta(days=days))
        if user_id is not None:
            query = query.filter(AssistantConversation.user_id == user_id)

        rows = query.order_by(
            AssistantConversation.created_at.desc()
        ).limit(limit).all()

        return [
            to_record_response(conversation, display_name or name)
            for conversation, display_name, name in rows
        ]

    def summarize(
        self,
        days: Optional[int] = None,
        limit: int = 100,
        concerning_threshold: float = -0.4,
        concerning_limit: int = 5,
        recent_limit: int = 10,
    ) -> InsightSummary:
        records = self.fetch_records(days=days, limit=limit)
        return summarize_records(
            records,
            concerning_threshold=concerning_threshold,
            concerning_limit=concerning_limit,
            recent_limit=recent_limit,
            window_days=days,
        )
