"""
JWT session authentication provider.
"""

from __future__ import annotations

from jose import JWTError
from pydantic import ValidationError

from app.core.config import Settings
from app.core.exceptions import AuthenticationError
from app.core.security import decode_session_token
from app.interfaces.auth_provider import Actor, IAuthProvider
from app.models.enums import UserRole


class JwtAuthProvider(IAuthProvider):
    """Auth provider validating HMAC session JWTs."""

    def __init__(self, settings: Settings):
        if not settings.JWT_SECRET:
            raise ValueError("JWT_SECRET must be set for jwt auth")
        self._settings = settings

    async def verify_token(self, token: str) -> Actor:
        try:
            claims = decode_session_token(token, self._settings)
        except JWTError as exc:
            raise AuthenticationError("Invalid session token") from exc

        subject = claims.get("sub")
        session_id = claims.get("sid")
        if not subject or not session_id:
            raise AuthenticationError("Session token is missing sub or sid")
        try:
            role = UserRole(claims.get("role", UserRole.DOCTOR.value))
        except ValueError as exc:
            raise AuthenticationError("Unknown role in session token") from exc
        try:
            return Actor(id=str(subject), role=role, session_id=str(session_id))
        except ValidationError as exc:
            raise AuthenticationError("Malformed session token claims") from exc

    def is_enabled(self) -> bool:
        return True
