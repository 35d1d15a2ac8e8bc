"""
Chat message repository interface.

Defines the contract for the per-session chat turn log.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.models.chat_session import ChatTurn
from app.models.enums import ChatRole


class IChatMessageRepository(ABC):
    """Abstract interface for chat turn persistence."""

    @abstractmethod
    async def append(
        self,
        session_id: str,
        user_id: str,
        role: ChatRole,
        content: str,
    ) -> ChatTurn:
        """
        Append one turn to a session.

        Args:
            session_id: Session ID
            user_id: Owner user ID
            role: Turn role
            content: Turn text (stored verbatim)

        Returns:
            The stored ChatTurn
        """
        pass

    @abstractmethod
    async def list_active(self, session_id: str) -> list[ChatTurn]:
        """
        List active turns of a session, oldest first.

        Args:
            session_id: Session ID

        Returns:
            List of chat turns (empty when the session has none)
        """
        pass

    @abstractmethod
    async def soft_delete_thread(self, session_id: str) -> int:
        """
        Deactivate every turn of a session.

        Args:
            session_id: Session ID

        Returns:
            Number of rows touched
        """
        pass
