"""
Authentication provider interface.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from app.models.enums import UserRole


class Actor(BaseModel):
    """Authenticated caller: who they are and which chat session they are in."""

    id: str
    role: UserRole = UserRole.DOCTOR
    session_id: str = Field(..., max_length=100)


class IAuthProvider(ABC):
    """Abstract interface for authentication providers."""

    @abstractmethod
    async def verify_token(self, token: str) -> Actor:
        """
        Verify a session token.

        Args:
            token: Bearer token from the request

        Returns:
            The authenticated actor

        Raises:
            AuthenticationError: the token is invalid or expired
        """
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check if authentication is enabled."""
        pass
