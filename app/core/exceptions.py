"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class ScriptDeskError(Exception):
    """Base exception for scriptdesk."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(ScriptDeskError):
    """Resource not found."""

    pass


class ValidationError(ScriptDeskError):
    """Validation error."""

    pass


class LLMError(ScriptDeskError):
    """LLM-related error."""

    pass


class AuthenticationError(ScriptDeskError):
    """Authentication failed."""

    pass


class InfrastructureError(ScriptDeskError):
    """Infrastructure-related error (DB, external services, etc.)."""

    pass


class BusinessLogicError(ScriptDeskError):
    """Business logic constraint violation."""

    pass


class InvalidTransitionError(BusinessLogicError):
    """A video script status change that its current status does not allow."""

    def __init__(self, message: str, current_status: str, target_status: str):
        super().__init__(
            message,
            details={"current_status": current_status, "target_status": target_status},
        )
        self.current_status = current_status
        self.target_status = target_status
