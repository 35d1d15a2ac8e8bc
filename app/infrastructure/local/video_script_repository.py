"""
SQL implementation of video script repository.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import func, select, update

from app.core.exceptions import InvalidTransitionError
from app.infrastructure.local.base_repository import SqlRepository
from app.infrastructure.local.database import VideoScriptORM
from app.interfaces.video_script_repository import IVideoScriptRepository
from app.models.enums import ScriptStatus
from app.models.video_script import VideoScript
from app.utils.datetime_utils import ensure_utc, now_utc


class SqlVideoScriptRepository(SqlRepository, IVideoScriptRepository):
    """SQL implementation of video script repository."""

    def _orm_to_model(self, orm: VideoScriptORM) -> VideoScript:
        """Convert ORM object to Pydantic model."""
        return VideoScript(
            id=UUID(orm.id),
            user_id=orm.user_id,
            content=orm.content,
            status=ScriptStatus(orm.status),
            reason=orm.reason,
            video_url=orm.video_url,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def create(self, user_id: str, content: str) -> VideoScript:
        """Create a PENDING script."""
        async with self._scope() as session:
            orm = VideoScriptORM(
                id=str(uuid4()),
                user_id=user_id,
                content=content,
                status=ScriptStatus.PENDING.value,
            )
            session.add(orm)
            await session.flush()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, script_id: UUID) -> Optional[VideoScript]:
        """Get a script by ID."""
        async with self._scope() as session:
            result = await session.execute(
                select(VideoScriptORM).where(VideoScriptORM.id == str(script_id))
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def list(
        self,
        user_id: Optional[str] = None,
        status: Optional[ScriptStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[VideoScript]:
        """List scripts, newest first."""
        async with self._scope() as session:
            query = select(VideoScriptORM)
            if user_id:
                query = query.where(VideoScriptORM.user_id == user_id)
            if status:
                query = query.where(VideoScriptORM.status == ScriptStatus(status).value)
            query = (
                query.order_by(VideoScriptORM.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def count_by_status(self) -> dict[ScriptStatus, int]:
        """Count scripts per status."""
        async with self._scope() as session:
            result = await session.execute(
                select(VideoScriptORM.status, func.count(VideoScriptORM.id))
                .group_by(VideoScriptORM.status)
            )
            counts = {status: 0 for status in ScriptStatus}
            for status, count in result.all():
                counts[ScriptStatus(status)] = count
            return counts

    async def transition(
        self,
        script_id: UUID,
        status: ScriptStatus,
        reason: Optional[str] = None,
        video_url: Optional[str] = None,
    ) -> Optional[VideoScript]:
        """Move a PENDING script to APPROVED or REJECTED."""
        target = ScriptStatus(status)
        async with self._scope() as session:
            # Conditional update keeps two concurrent reviews from both succeeding
            result = await session.execute(
                update(VideoScriptORM)
                .where(
                    VideoScriptORM.id == str(script_id),
                    VideoScriptORM.status == ScriptStatus.PENDING.value,
                )
                .values(
                    status=target.value,
                    reason=reason,
                    video_url=video_url,
                    updated_at=now_utc(),
                )
                .execution_options(synchronize_session=False)
            )

            row = await session.execute(
                select(VideoScriptORM)
                .where(VideoScriptORM.id == str(script_id))
                .execution_options(populate_existing=True)
            )
            orm = row.scalar_one_or_none()
            if orm is None:
                return None
            if not result.rowcount:
                raise InvalidTransitionError(
                    f"Script {script_id} is already {orm.status}",
                    current_status=orm.status,
                    target_status=target.value,
                )
            return self._orm_to_model(orm)
