import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database.database import get_db
from ..models.user_models import User
from ..schemas.assistant_schemas import (
    AssistantStatusResponse,
    ChatRequest,
    ChatResponse,
    ConversationHistoryResponse,
    ErrorResponse,
    InsightsResponse,
)
from ..services.conversation_recorder import ConversationRecorder
from ..services.emotion_classifier import SENTIMENT_SCORES, classify
from ..services.emotion_lexicon import categories, lookup
from ..services.insight_aggregator import InsightAggregator
from ..services.response_generator import generate
from ..utils.auth import get_current_user, require_admin

router = APIRouter(
    prefix="/api/ai-assistant",
    tags=["ai-assistant"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Missing or invalid input"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Storage query failed"},
    },
)

AUTH_ERRORS = {
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing or invalid token"},
}
ADMIN_ERRORS = {
    **AUTH_ERRORS,
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse, "description": "Admin access required"},
}

logger = logging.getLogger("mindhaven.assistant")


def _require_message(request: ChatRequest) -> str:
    if not request.message or not request.message.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message is required"
        )
    return request.message


@router.post("/chat", response_model=ChatResponse, responses=AUTH_ERRORS)
def chat(
    request: ChatRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Classify the message, reply to it and store the exchange
    """
    message = _require_message(request)
    settings = get_settings()

    classification = classify(message, crisis_priority=settings.CRISIS_KEYWORD_PRIORITY)
    reply = generate(message, classification.emotion, current_user.greeting_name)

    # The reply goes out even if the audit write fails
    result = ConversationRecorder(db).record(current_user.id, message, reply, classification)
    if result.success:
        logger.info("Stored conversation %s via %s", result.record_id, result.path)
    else:
        logger.warning("Conversation for user %s not stored (%s)", current_user.id, result.reason)

    return ChatResponse(
        response=reply,
        emotion=classification.emotion.value,
        sentiment=classification.sentiment_score
    )


@router.post("/simple-chat", response_model=ChatResponse)
async def simple_chat(request: ChatRequest):
    """
    Classify and reply without authentication or persistence
    """
    message = _require_message(request)
    classification = classify(message, crisis_priority=get_settings().CRISIS_KEYWORD_PRIORITY)
    logger.debug("Simple chat classified as %s", classification.emotion.value)

    return ChatResponse(
        response=generate(message, classification.emotion, None),
        emotion=classification.emotion.value,
        sentiment=classification.sentiment_score
    )


@router.get("/conversations", response_model=ConversationHistoryResponse, responses=AUTH_ERRORS)
def get_my_conversations(
    limit: int = Query(20, ge=1, le=100, description="Maximum conversations to return"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get the current user's conversation history, newest first
    """
    try:
        conversations = InsightAggregator(db).fetch_records(limit=limit, user_id=current_user.id)
    except Exception as e:
        logger.error("Error fetching conversations for user %s: %s", current_user.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch conversation history"
        )

    return ConversationHistoryResponse(conversations=conversations, total_count=len(conversations))


@router.get("/insights", response_model=InsightsResponse, responses=ADMIN_ERRORS)
def get_insights(
    days: Optional[int] = Query(None, ge=1, le=365, description="Only include the last N days"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Get emotion insights across all users for the admin dashboard
    """
    settings = get_settings()
    try:
        summary = InsightAggregator(db).summarize(
            days=days,
            limit=settings.INSIGHTS_FETCH_LIMIT,
            concerning_threshold=settings.CONCERNING_SENTIMENT_THRESHOLD,
            concerning_limit=settings.CONCERNING_USERS_LIMIT,
            recent_limit=settings.RECENT_CONVERSATIONS_LIMIT,
        )
    except Exception as e:
        logger.error("Error fetching conversation data: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch conversation data"
        )

    return InsightsResponse(insights=summary)


@router.get("/status", response_model=AssistantStatusResponse)
async def get_assistant_status():
    """Get the classifier's categories and scoring table"""
    return AssistantStatusResponse(
        status="active",
        categories=[category.value for category in categories()],
        keyword_counts={category.value: len(lookup(category)) for category in categories()},
        sentiment_scores={category.value: score for category, score in SENTIMENT_SCORES.items()},
        crisis_priority=get_settings().CRISIS_KEYWORD_PRIORITY,
    )
