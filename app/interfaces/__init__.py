"""Abstract interfaces for infrastructure abstraction."""

from app.interfaces.auth_provider import Actor, IAuthProvider
from app.interfaces.chat_message_repository import IChatMessageRepository
from app.interfaces.llm_provider import ILLMProvider
from app.interfaces.unit_of_work import IUnitOfWork
from app.interfaces.video_script_repository import IVideoScriptRepository

__all__ = [
    "Actor",
    "IAuthProvider",
    "IChatMessageRepository",
    "ILLMProvider",
    "IUnitOfWork",
    "IVideoScriptRepository",
]
