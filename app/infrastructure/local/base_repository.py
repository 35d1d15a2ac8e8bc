"""
Shared session handling for SQL repositories.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InfrastructureError
from app.infrastructure.local.database import get_session_factory


class SqlRepository:
    """
    Base for repositories that run either standalone or inside a unit of work.

    Standalone repositories open a session per call and commit it.
    Bound repositories reuse the caller's session and only flush; the
    owner of that session decides whether to commit.
    """

    def __init__(self, session_factory=None, session: Optional[AsyncSession] = None):
        self._bound_session = session
        if session is None:
            self._session_factory = session_factory or get_session_factory()
        else:
            self._session_factory = None

    @asynccontextmanager
    async def _scope(self) -> AsyncIterator[AsyncSession]:
        try:
            if self._bound_session is not None:
                yield self._bound_session
                await self._bound_session.flush()
            else:
                async with self._session_factory() as session:
                    yield session
                    await session.commit()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Database operation failed", details=str(exc)) from exc
