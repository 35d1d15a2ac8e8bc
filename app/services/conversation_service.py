"""
Conversation Service.

Runs the script intake chat: one call to send() is one user/assistant
exchange. A reply that opens with the FINALIZED SCRIPT marker closes the
intake and is filed as a PENDING video script for review.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional
from uuid import UUID

from app.core.exceptions import LLMError
from app.core.logger import setup_logger
from app.interfaces.chat_message_repository import IChatMessageRepository
from app.interfaces.llm_provider import ILLMProvider
from app.interfaces.unit_of_work import IUnitOfWork
from app.models.chat_session import ChatMessage
from app.models.enums import ChatRole
from app.services.chat_history import ChatHistory
from app.services.session_locks import SessionLocks

logger = setup_logger(__name__)

FINALIZED_MARKER = "FINALIZED SCRIPT"

# Leading punctuation/whitespace (e.g. "## ", "**") is allowed before the marker
_FINALIZED_RE = re.compile(r"^[^a-zA-Z0-9]*" + re.escape(FINALIZED_MARKER))


def is_finalized(text: str) -> bool:
    """True when text starts with the marker, ignoring leading non-alphanumerics."""
    return bool(text) and _FINALIZED_RE.match(text) is not None


def load_system_prompt(path: str) -> str:
    """
    Read the intake system prompt.

    A missing or unreadable file is logged and yields an empty prompt.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading system prompt file {path}: {e}")
        return ""


@dataclass(frozen=True)
class SendResult:
    """Outcome of one chat exchange."""

    message: str
    finalized: bool
    script_id: Optional[UUID] = None


class ConversationService:
    """Chat session state machine over persisted history."""

    def __init__(
        self,
        llm_provider: ILLMProvider,
        message_repo: IChatMessageRepository,
        uow_factory: Callable[[], IUnitOfWork],
        system_prompt: str,
        locks: Optional[SessionLocks] = None,
    ):
        self.llm_provider = llm_provider
        self.message_repo = message_repo
        self.uow_factory = uow_factory
        self.system_prompt = system_prompt
        self.locks = locks or SessionLocks()

    def _history(self, session_id: str, user_id: Optional[str] = None) -> ChatHistory:
        return ChatHistory(self.message_repo, session_id, user_id)

    async def send(self, session_id: str, user_id: str, text: str) -> SendResult:
        """
        Run one exchange.

        The model call happens before any write. On success the user turn,
        the assistant turn and (when finalized) the script row are committed
        together; on any failure nothing is stored.

        Raises:
            LLMError: the model call failed
            InfrastructureError: the store failed
        """
        async with self.locks.hold(session_id):
            history = self._history(session_id, user_id)
            prior_turns = await history.load()
            logger.info(f"Chat turn: session={session_id} history={len(prior_turns)}")

            try:
                output = await self.llm_provider.complete(self.system_prompt, prior_turns, text)
            except LLMError:
                logger.warning(f"LLM call failed for session {session_id}")
                raise
            except Exception as e:
                logger.warning(f"LLM call failed for session {session_id}: {e}")
                raise LLMError("LLM request failed", details=str(e)) from e

            finalized = is_finalized(output)
            script_id = None
            async with self.uow_factory() as uow:
                turn_log = history.bind(uow.messages)
                await turn_log.save(ChatRole.USER, text)
                await turn_log.save(ChatRole.ASSISTANT, output)
                if finalized:
                    # Every marked reply files a script, even if the thread already produced one
                    script = await uow.scripts.create(user_id, output)
                    script_id = script.id

            if finalized:
                logger.info(f"Script finalized: session={session_id} script={script_id}")
            return SendResult(message=output, finalized=finalized, script_id=script_id)

    async def fetch_messages(self, session_id: str) -> list[ChatMessage]:
        """Active history in client shape."""
        turns = await self._history(session_id).turns()
        return [ChatMessage.from_turn(turn) for turn in turns]

    async def reset(self, session_id: str) -> None:
        """Start a fresh thread under the same session ID."""
        async with self.locks.hold(session_id):
            await self._history(session_id).reset()
        logger.info(f"Chat reset: session={session_id}")
