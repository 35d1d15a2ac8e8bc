"""Pydantic models (schemas) for the application."""

from app.models.enums import ChatRole, MessageRole, ScriptStatus, UserRole
from app.models.chat import ChatSendRequest, ChatSendResponse
from app.models.chat_session import ChatMessage, ChatTurn, ConversationTurn
from app.models.video_script import (
    ScriptApproveRequest,
    ScriptListResponse,
    ScriptRejectRequest,
    VideoScript,
)

__all__ = [
    # Enums
    "ChatRole",
    "MessageRole",
    "ScriptStatus",
    "UserRole",
    # Chat
    "ChatSendRequest",
    "ChatSendResponse",
    "ChatMessage",
    "ChatTurn",
    "ConversationTurn",
    # Video scripts
    "VideoScript",
    "ScriptApproveRequest",
    "ScriptRejectRequest",
    "ScriptListResponse",
]
