"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the correct
infrastructure implementations based on environment configuration.
"""

from functools import lru_cache
from typing import Annotated, Callable

from fastapi import Depends, Header, HTTPException, status

from app.core.config import get_settings
from app.core.exceptions import AuthenticationError
from app.interfaces.auth_provider import Actor, IAuthProvider
from app.interfaces.chat_message_repository import IChatMessageRepository
from app.interfaces.llm_provider import ILLMProvider
from app.interfaces.unit_of_work import IUnitOfWork
from app.interfaces.video_script_repository import IVideoScriptRepository
from app.models.enums import UserRole
from app.services.conversation_service import ConversationService, load_system_prompt


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_chat_message_repository() -> IChatMessageRepository:
    """Get chat message repository instance."""
    from app.infrastructure.local.chat_message_repository import SqlChatMessageRepository
    return SqlChatMessageRepository()


@lru_cache()
def get_video_script_repository() -> IVideoScriptRepository:
    """Get video script repository instance."""
    from app.infrastructure.local.video_script_repository import SqlVideoScriptRepository
    return SqlVideoScriptRepository()


@lru_cache()
def get_unit_of_work_factory() -> Callable[[], IUnitOfWork]:
    """Get a factory producing one transaction scope per call."""
    from app.infrastructure.local.database import get_session_factory
    from app.infrastructure.local.unit_of_work import SqlUnitOfWork

    session_factory = get_session_factory()
    return lambda: SqlUnitOfWork(session_factory)


# ===========================================
# Provider Dependencies
# ===========================================


@lru_cache()
def get_llm_provider() -> ILLMProvider:
    """
    Get LLM provider instance based on LLM_PROVIDER setting.

    Supports:
    - litellm: LiteLLM (OpenAI, Bedrock, etc. with optional custom endpoint)
    - gemini-api: Gemini API (API Key)
    """
    settings = get_settings()

    if settings.LLM_PROVIDER == "litellm":
        from app.infrastructure.local.litellm_provider import LiteLLMProvider
        return LiteLLMProvider(settings.LITELLM_MODEL)

    elif settings.LLM_PROVIDER == "gemini-api":
        from app.infrastructure.local.gemini_api_provider import GeminiAPIProvider
        return GeminiAPIProvider(settings.GEMINI_MODEL)

    else:
        raise ValueError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}")


@lru_cache()
def get_system_prompt() -> str:
    """Intake system prompt, read once per process."""
    return load_system_prompt(get_settings().SYSTEM_PROMPT_PATH)


@lru_cache()
def get_conversation_service() -> ConversationService:
    """Process-wide conversation service (shares the per-session locks)."""
    return ConversationService(
        llm_provider=get_llm_provider(),
        message_repo=get_chat_message_repository(),
        uow_factory=get_unit_of_work_factory(),
        system_prompt=get_system_prompt(),
    )


@lru_cache()
def get_auth_provider() -> IAuthProvider:
    """Get auth provider instance."""
    settings = get_settings()
    if settings.AUTH_PROVIDER == "jwt":
        from app.infrastructure.auth.jwt_auth import JwtAuthProvider

        return JwtAuthProvider(settings)

    from app.infrastructure.local.mock_auth import MockAuthProvider
    return MockAuthProvider(enabled=True)


# ===========================================
# User Authentication
# ===========================================


async def get_current_actor(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> Actor:
    """
    Get current authenticated actor.

    In mock mode, the bearer token is "user_id[:role[:session_id]]".
    In jwt mode, the token is a signed session JWT.
    """
    if not auth_provider.is_enabled():
        # Mock actor for development
        return Actor(id="dev_user", role=UserRole.DOCTOR, session_id="dev-session")

    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    try:
        return await auth_provider.verify_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )


def require_roles(*roles: UserRole):
    """Dependency allowing only the given actor roles."""

    async def _check(actor: Actor = Depends(get_current_actor)) -> Actor:
        if actor.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not allowed for this role",
            )
        return actor

    return _check


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

VideoScriptRepo = Annotated[IVideoScriptRepository, Depends(get_video_script_repository)]
Conversation = Annotated[ConversationService, Depends(get_conversation_service)]
ChatActor = Annotated[Actor, Depends(require_roles(UserRole.DOCTOR, UserRole.ADMIN))]
AdminActor = Annotated[Actor, Depends(require_roles(UserRole.ADMIN))]
