"""
Video script API endpoints.

Admins review finalized scripts; authors see their own.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from app.api.deps import AdminActor, ChatActor, VideoScriptRepo
from app.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from app.models.enums import ScriptStatus, UserRole
from app.models.video_script import (
    ScriptApproveRequest,
    ScriptListResponse,
    ScriptRejectRequest,
    VideoScript,
)
from app.services import script_review_service as review

router = APIRouter()


@router.get("", response_model=ScriptListResponse)
async def list_scripts(
    _admin: AdminActor,
    repo: VideoScriptRepo,
    status_filter: Optional[ScriptStatus] = Query(None, alias="status"),
    user_id: Optional[str] = Query(None),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """List scripts for review, newest first."""
    return await review.list_scripts(
        repo,
        user_id=user_id.strip() if user_id else None,
        status=status_filter,
        limit=limit,
        offset=offset,
    )


@router.get("/mine", response_model=list[VideoScript])
async def list_my_scripts(
    actor: ChatActor,
    repo: VideoScriptRepo,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """Scripts authored by the caller."""
    return await repo.list(user_id=actor.id, limit=limit, offset=offset)


@router.get("/{script_id}", response_model=VideoScript)
async def get_script(
    script_id: UUID,
    actor: ChatActor,
    repo: VideoScriptRepo,
):
    """One script; authors only see their own, admins see all."""
    viewer_id = None if actor.role == UserRole.ADMIN else actor.id
    try:
        return await review.get_script(repo, script_id, viewer_id=viewer_id)
    except NotFoundError as e:
        _raise_review_error(e, script_id)


def _raise_review_error(e: Exception, script_id: UUID) -> None:
    if isinstance(e, NotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Script {script_id} not found",
        ) from e
    if isinstance(e, InvalidTransitionError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        ) from e
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(e),
    ) from e


@router.post("/{script_id}/approve", response_model=VideoScript)
async def approve_script(
    script_id: UUID,
    request: ScriptApproveRequest,
    _admin: AdminActor,
    repo: VideoScriptRepo,
):
    """Approve a pending script with its rendered video URL."""
    try:
        return await review.approve_script(repo, script_id, request.video_url)
    except (NotFoundError, InvalidTransitionError, ValidationError) as e:
        _raise_review_error(e, script_id)


@router.post("/{script_id}/reject", response_model=VideoScript)
async def reject_script(
    script_id: UUID,
    request: ScriptRejectRequest,
    _admin: AdminActor,
    repo: VideoScriptRepo,
):
    """Reject a pending script with a reason."""
    try:
        return await review.reject_script(repo, script_id, request.reason)
    except (NotFoundError, InvalidTransitionError, ValidationError) as e:
        _raise_review_error(e, script_id)
