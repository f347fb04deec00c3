from .base import Base
from .user_models import User
from .conversation_models import AssistantConversation

__all__ = [
    'Base',
    'User',
    'AssistantConversation',
]
