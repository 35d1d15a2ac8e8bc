"""
Script review service.

Admin decisions on finalized video scripts.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from app.core.exceptions import NotFoundError, ValidationError
from app.core.logger import logger
from app.interfaces.video_script_repository import IVideoScriptRepository
from app.models.enums import ScriptStatus
from app.models.video_script import ScriptListResponse, VideoScript


async def list_scripts(
    repo: IVideoScriptRepository,
    user_id: Optional[str] = None,
    status: Optional[ScriptStatus] = None,
    limit: int = 50,
    offset: int = 0,
) -> ScriptListResponse:
    """List scripts with overall per-status totals."""
    scripts = await repo.list(user_id=user_id, status=status, limit=limit, offset=offset)
    counts = await repo.count_by_status()
    return ScriptListResponse(
        scripts=scripts,
        pending_count=counts.get(ScriptStatus.PENDING, 0),
        approved_count=counts.get(ScriptStatus.APPROVED, 0),
        rejected_count=counts.get(ScriptStatus.REJECTED, 0),
    )


async def approve_script(
    repo: IVideoScriptRepository,
    script_id: UUID,
    video_url: str,
) -> VideoScript:
    """PENDING -> APPROVED with the rendered video URL."""
    if not video_url or not video_url.strip():
        raise ValidationError("video_url is required")
    script = await repo.transition(script_id, ScriptStatus.APPROVED, video_url=video_url.strip())
    if script is None:
        raise NotFoundError(f"Script {script_id} not found")
    logger.info(f"Script approved: {script_id}")
    return script


async def reject_script(
    repo: IVideoScriptRepository,
    script_id: UUID,
    reason: str,
) -> VideoScript:
    """PENDING -> REJECTED with a reason."""
    if not reason or not reason.strip():
        raise ValidationError("Rejection reason is required")
    script = await repo.transition(script_id, ScriptStatus.REJECTED, reason=reason.strip())
    if script is None:
        raise NotFoundError(f"Script {script_id} not found")
    logger.info(f"Script rejected: {script_id}")
    return script


async def get_script(
    repo: IVideoScriptRepository,
    script_id: UUID,
    viewer_id: Optional[str] = None,
) -> VideoScript:
    """
    Fetch one script.

    With viewer_id set, only that author's scripts are visible; anyone
    else's script reads as missing.
    """
    script = await repo.get(script_id)
    if script is None or (viewer_id is not None and script.user_id != viewer_id):
        raise NotFoundError(f"Script {script_id} not found")
    return script
