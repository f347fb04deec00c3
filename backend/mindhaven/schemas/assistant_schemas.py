from pydantic import BaseModel, Field
from typing import Dict, List, Optional

# Request Schemas
class ChatRequest(BaseModel):
    message: str = Field(..., description="Message sent by the user")

# Response Schemas
class ChatResponse(BaseModel):
    success: bool = Field(True, description="Request outcome")
    response: str = Field(..., description="Assistant reply")
    emotion: str = Field(..., description="Detected emotion category")
    sentiment: float = Field(..., ge=-1, le=1, description="Sentiment score for the detected emotion")

class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Request outcome")
    error: str = Field(..., description="Error message")

class ConversationRecordResponse(BaseModel):
    id: str = Field(..., description="Conversation record ID")
    user_id: int = Field(..., description="User who sent the message")
    display_name: Optional[str] = Field(None, description="User display name")
    message: str = Field(..., description="User message")
    response: str = Field(..., description="Assistant reply")
    emotion: str = Field(..., description="Detected emotion")
    emoji: Optional[str] = Field(None, description="Emoji for the detected emotion")
    sentiment_score: Optional[float] = Field(None, ge=-1, le=1, description="Sentiment score")
    created_at: Optional[str] = Field(None, description="Creation timestamp")

class ConcerningUser(BaseModel):
    user_id: int = Field(..., description="User identifier")
    display_name: Optional[str] = Field(None, description="User display name")
    avg_sentiment: float = Field(..., ge=-1, le=1, description="Average sentiment of the user's conversations")
    conversation_count: int = Field(..., ge=1, description="Conversations counted for this user")

class InsightSummary(BaseModel):
    total_conversations: int = Field(..., ge=0, description="Conversations in the window")
    total_users: int = Field(..., ge=0, description="Distinct users in the window")
    average_sentiment: float = Field(..., ge=-1, le=1, description="Mean sentiment score")
    emotion_distribution: Dict[str, int] = Field(..., description="Conversations per emotion")
    concerning_users: List[ConcerningUser] = Field(..., description="Users with persistently negative sentiment")
    recent_conversations: List[ConversationRecordResponse] = Field(..., description="Most recent conversations")
    window_days: Optional[int] = Field(None, description="Time window in days, if any")

class InsightsResponse(BaseModel):
    success: bool = Field(True, description="Request outcome")
    insights: InsightSummary = Field(..., description="Aggregated emotion insights")

class ConversationHistoryResponse(BaseModel):
    success: bool = Field(True, description="Request outcome")
    conversations: List[ConversationRecordResponse] = Field(..., description="Conversations, newest first")
    total_count: int = Field(..., ge=0, description="Number of conversations returned")

class AssistantStatusResponse(BaseModel):
    status: str = Field(..., description="Service status")
    categories: List[str] = Field(..., description="Supported emotion categories")
    keyword_counts: Dict[str, int] = Field(..., description="Keywords per category")
    sentiment_scores: Dict[str, float] = Field(..., description="Fixed sentiment score per category")
    crisis_priority: bool = Field(..., description="Whether crisis keywords override the count tie-break")
