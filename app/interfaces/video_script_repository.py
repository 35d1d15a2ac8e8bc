"""
Video script repository interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.models.enums import ScriptStatus
from app.models.video_script import VideoScript


class IVideoScriptRepository(ABC):
    """Abstract interface for video script persistence."""

    @abstractmethod
    async def create(self, user_id: str, content: str) -> VideoScript:
        """Create a PENDING script."""
        pass

    @abstractmethod
    async def get(self, script_id: UUID) -> Optional[VideoScript]:
        """Get a script by ID."""
        pass

    @abstractmethod
    async def list(
        self,
        user_id: Optional[str] = None,
        status: Optional[ScriptStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[VideoScript]:
        """List scripts, newest first."""
        pass

    @abstractmethod
    async def count_by_status(self) -> dict[ScriptStatus, int]:
        """Count scripts per status (every status present, zero when none)."""
        pass

    @abstractmethod
    async def transition(
        self,
        script_id: UUID,
        status: ScriptStatus,
        reason: Optional[str] = None,
        video_url: Optional[str] = None,
    ) -> Optional[VideoScript]:
        """
        Move a PENDING script to a final status.

        Args:
            script_id: Script ID
            status: APPROVED or REJECTED
            reason: Rejection reason
            video_url: Rendered video URL

        Returns:
            Updated script, or None if not found

        Raises:
            InvalidTransitionError: the script is not PENDING
        """
        pass
