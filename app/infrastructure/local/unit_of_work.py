"""
SQL unit of work for chat writes.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InfrastructureError
from app.core.logger import logger
from app.infrastructure.local.chat_message_repository import SqlChatMessageRepository
from app.infrastructure.local.database import get_session_factory
from app.infrastructure.local.video_script_repository import SqlVideoScriptRepository
from app.interfaces.unit_of_work import IUnitOfWork


class SqlUnitOfWork(IUnitOfWork):
    """One AsyncSession shared by the message and script repositories."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()
        self._session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "SqlUnitOfWork":
        self._session = self._session_factory()
        self.messages = SqlChatMessageRepository(session=self._session)
        self.scripts = SqlVideoScriptRepository(session=self._session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        session = self._session
        self._session = None
        try:
            if exc_type is not None:
                try:
                    await session.rollback()
                except SQLAlchemyError as err:
                    # The block's own exception keeps propagating
                    logger.error(f"Rollback after failed chat turn also failed: {err}")
                return
            try:
                await session.commit()
            except SQLAlchemyError as err:
                await session.rollback()
                raise InfrastructureError("Failed to commit chat turn", details=str(err)) from err
        finally:
            await session.close()
