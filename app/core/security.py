"""
Session token helpers.

Tokens are HS256 JWTs carrying the user id (sub), role and chat session id (sid).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from jose import jwt

from app.core.config import Settings
from app.models.enums import UserRole

_ALGORITHM = "HS256"


def new_session_id() -> str:
    """Generate a random chat session ID."""
    return str(uuid4())


def create_session_token(
    user_id: str,
    settings: Settings,
    role: UserRole = UserRole.DOCTOR,
    session_id: str | None = None,
    expires_minutes: int | None = None,
) -> str:
    """Create a signed session JWT."""
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=expires_minutes or settings.SESSION_TTL_MINUTES)
    payload: dict[str, Any] = {
        "sub": user_id,
        "role": UserRole(role).value,
        "sid": session_id or new_session_id(),
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    if settings.JWT_ISSUER:
        payload["iss"] = settings.JWT_ISSUER
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=_ALGORITHM)


def decode_session_token(token: str, settings: Settings) -> dict[str, Any]:
    """Decode and verify a session JWT (signature, expiry, issuer)."""
    options = {"verify_iss": bool(settings.JWT_ISSUER)}
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[_ALGORITHM],
        issuer=settings.JWT_ISSUER or None,
        options=options,
    )
