"""
Chat history adapter.

Translates stored chat rows into the ordered role/content turns the LLM
provider consumes, and writes new turns back.
"""

from __future__ import annotations

from typing import Optional

from app.core.exceptions import ValidationError
from app.interfaces.chat_message_repository import IChatMessageRepository
from app.models.chat_session import ChatTurn, ConversationTurn
from app.models.enums import ChatRole


class ChatHistory:
    """History of one chat session, backed by the message repository."""

    def __init__(
        self,
        repo: IChatMessageRepository,
        session_id: str,
        user_id: Optional[str] = None,
    ):
        self._repo = repo
        self.session_id = session_id
        self.user_id = user_id

    def bind(self, repo: IChatMessageRepository) -> "ChatHistory":
        """Same session, written through another repository (e.g. a unit of work)."""
        return ChatHistory(repo, self.session_id, self.user_id)

    async def turns(self) -> list[ChatTurn]:
        """Active stored rows, oldest first."""
        return await self._repo.list_active(self.session_id)

    async def load(self) -> list[ConversationTurn]:
        """Active history as role/content turns. Queries the store on every call."""
        return [turn.to_conversation_turn() for turn in await self.turns()]

    async def save(self, role: ChatRole, content: str) -> ChatTurn:
        if not self.user_id:
            raise ValidationError("user_id is required to save chat turns")
        return await self._repo.append(self.session_id, self.user_id, role, content)

    async def reset(self) -> None:
        """Soft-delete the thread; later loads start empty."""
        await self._repo.soft_delete_thread(self.session_id)
