"""
Video script models.

A video script is the output of a finalized intake conversation.
"""

from datetime import datetime
from typing import Optional
from urllib.parse import urlparse
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.models.enums import ScriptStatus


class VideoScript(BaseModel):
    """Video script model."""

    id: UUID
    user_id: str = Field(..., description="Author user ID")
    content: str = Field(..., description="Finalized script text")
    status: ScriptStatus = ScriptStatus.PENDING
    reason: Optional[str] = Field(None, description="Rejection reason (REJECTED only)")
    video_url: Optional[str] = Field(None, description="Rendered video URL (APPROVED only)")
    created_at: datetime
    updated_at: datetime


class ScriptApproveRequest(BaseModel):
    """Request model for approving a script."""

    video_url: str = Field(..., min_length=1, max_length=2000)

    @field_validator("video_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = value.strip()
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Invalid video URL")
        return value


class ScriptRejectRequest(BaseModel):
    """Request model for rejecting a script."""

    reason: str = Field(..., min_length=1, max_length=2000)

    @field_validator("reason")
    @classmethod
    def _check_reason(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Rejection reason is required")
        return value


class ScriptListResponse(BaseModel):
    """Paged script list with per-status totals."""

    scripts: list[VideoScript]
    pending_count: int = 0
    approved_count: int = 0
    rejected_count: int = 0
