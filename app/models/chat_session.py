"""
Chat turn models.

These models persist chat history per session and carry it to the LLM.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.enums import ChatRole, MessageRole


class ConversationTurn(BaseModel):
    """Role-tagged turn as passed to the LLM provider."""

    role: ChatRole
    content: str


class ChatTurnBase(BaseModel):
    """Base chat turn fields."""

    session_id: str = Field(..., max_length=100, description="Chat session ID")
    role: ChatRole = Field(..., description="Message role")
    content: str = Field("", description="Message content")


class ChatTurn(ChatTurnBase):
    """Stored chat turn."""

    id: int = Field(..., description="Store-assigned id, increasing in creation order")
    user_id: str = Field(..., description="Owner user ID")
    active: bool = True
    created_at: datetime

    def to_conversation_turn(self) -> ConversationTurn:
        return ConversationTurn(role=self.role, content=self.content)


class ChatMessage(BaseModel):
    """Chat message as returned to clients."""

    id: str
    content: str
    role: MessageRole

    @classmethod
    def from_turn(cls, turn: ChatTurn) -> "ChatMessage":
        return cls(
            id=str(turn.id),
            content=turn.content,
            role=MessageRole.from_chat_role(turn.role),
        )
