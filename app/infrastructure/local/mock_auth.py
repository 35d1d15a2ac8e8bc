"""
Mock authentication provider for local development.
"""

from pydantic import ValidationError

from app.core.exceptions import AuthenticationError
from app.interfaces.auth_provider import Actor, IAuthProvider
from app.models.enums import UserRole


class MockAuthProvider(IAuthProvider):
    """Mock auth provider that trusts the token's contents."""

    def __init__(self, enabled: bool = False):
        """
        Initialize mock auth provider.

        Args:
            enabled: Whether authentication is required
        """
        self._enabled = enabled

    async def verify_token(self, token: str) -> Actor:
        """
        Verify token - in mock mode, token is "user_id[:role[:session_id]]".

        Without a session part, the user id doubles as the session id so a
        developer keeps one conversation across requests.
        """
        parts = token.split(":")
        user_id = parts[0].strip()
        if not user_id:
            raise AuthenticationError("Empty mock token")
        try:
            role = UserRole(parts[1].upper()) if len(parts) > 1 and parts[1] else UserRole.DOCTOR
        except ValueError as exc:
            raise AuthenticationError(f"Unknown role: {parts[1]}") from exc
        session_id = parts[2] if len(parts) > 2 and parts[2] else f"dev-{user_id}"
        try:
            return Actor(id=user_id, role=role, session_id=session_id)
        except ValidationError as exc:
            raise AuthenticationError("Malformed mock token") from exc

    def is_enabled(self) -> bool:
        """Check if authentication is enabled."""
        return self._enabled
