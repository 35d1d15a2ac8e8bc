"""
Shared test fixtures.

Repositories run against an in-memory SQLite database; the LLM is a fake.
"""

from typing import Optional, Sequence

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.infrastructure.local.chat_message_repository import SqlChatMessageRepository
from app.infrastructure.local.database import Base, ChatMessageORM, VideoScriptORM
from app.infrastructure.local.unit_of_work import SqlUnitOfWork
from app.infrastructure.local.video_script_repository import SqlVideoScriptRepository
from app.interfaces.llm_provider import ILLMProvider
from app.models.chat_session import ConversationTurn
from app.services.conversation_service import ConversationService


class FakeLLMProvider(ILLMProvider):
    """Replays queued replies (or echoes the input) and records every call."""

    def __init__(self):
        self.replies: list[str] = []
        self.error: Optional[Exception] = None
        self.calls: list[tuple[str, list[ConversationTurn], str]] = []

    def get_model_name(self) -> str:
        return "fake"

    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ConversationTurn],
        user_input: str,
    ) -> str:
        self.calls.append((system_prompt, list(history), user_input))
        if self.error is not None:
            raise self.error
        if self.replies:
            return self.replies.pop(0)
        return f"echo: {user_input}"


async def _make_factory(url: str):
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine, sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session_factory():
    """Session factory over a fresh in-memory database."""
    engine, factory = await _make_factory("sqlite+aiosqlite:///:memory:")
    yield factory
    await engine.dispose()


@pytest.fixture
async def file_session_factory(tmp_path):
    """Session factory over a file database (separate connections per session)."""
    engine, factory = await _make_factory(f"sqlite+aiosqlite:///{tmp_path / 'chat.db'}")
    yield factory
    await engine.dispose()


@pytest.fixture
def test_user_id():
    return "doctor_1"


@pytest.fixture
def message_repo(session_factory):
    return SqlChatMessageRepository(session_factory)


@pytest.fixture
def script_repo(session_factory):
    return SqlVideoScriptRepository(session_factory)


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SqlUnitOfWork(session_factory)


@pytest.fixture
def fake_llm():
    return FakeLLMProvider()


@pytest.fixture
def conversation(fake_llm, message_repo, uow_factory):
    return ConversationService(
        llm_provider=fake_llm,
        message_repo=message_repo,
        uow_factory=uow_factory,
        system_prompt="You are a script assistant.",
    )


@pytest.fixture
def count_rows(session_factory):
    """Count all stored chat turns and scripts, active or not."""

    async def _count() -> tuple[int, int]:
        async with session_factory() as session:
            turns = await session.scalar(select(func.count(ChatMessageORM.id)))
            scripts = await session.scalar(select(func.count(VideoScriptORM.id)))
            return turns, scripts

    return _count
