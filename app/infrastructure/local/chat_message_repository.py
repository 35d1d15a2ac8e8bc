"""
SQL implementation of chat message repository.
"""

from __future__ import annotations

from sqlalchemy import select, update

from app.infrastructure.local.base_repository import SqlRepository
from app.infrastructure.local.database import ChatMessageORM
from app.interfaces.chat_message_repository import IChatMessageRepository
from app.models.chat_session import ChatTurn
from app.models.enums import ChatRole
from app.utils.datetime_utils import ensure_utc


class SqlChatMessageRepository(SqlRepository, IChatMessageRepository):
    """SQL implementation of the chat turn log."""

    def _orm_to_model(self, orm: ChatMessageORM) -> ChatTurn:
        """Convert ORM object to Pydantic model."""
        return ChatTurn(
            id=orm.id,
            session_id=orm.session_id,
            user_id=orm.user_id,
            role=ChatRole(orm.role),
            content=orm.content,
            active=orm.active,
            created_at=ensure_utc(orm.created_at),
        )

    async def append(
        self,
        session_id: str,
        user_id: str,
        role: ChatRole,
        content: str,
    ) -> ChatTurn:
        """Append one turn to a session."""
        async with self._scope() as session:
            orm = ChatMessageORM(
                session_id=session_id,
                user_id=user_id,
                role=ChatRole(role).value,
                content=content or "",
                active=True,
            )
            session.add(orm)
            await session.flush()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def list_active(self, session_id: str) -> list[ChatTurn]:
        """List active turns of a session, oldest first."""
        async with self._scope() as session:
            query = (
                select(ChatMessageORM)
                .where(
                    ChatMessageORM.session_id == session_id,
                    ChatMessageORM.active.is_(True),
                )
                .order_by(ChatMessageORM.id.asc())
            )
            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def soft_delete_thread(self, session_id: str) -> int:
        """Deactivate every turn of a session in one statement."""
        async with self._scope() as session:
            result = await session.execute(
                update(ChatMessageORM)
                .where(ChatMessageORM.session_id == session_id)
                .values(active=False)
            )
            return result.rowcount or 0
