"""
Enum definitions for the application.

These enums are used across models and provide type-safe role/status values.
"""

from enum import Enum


class ChatRole(str, Enum):
    """Role tag stored with each chat turn."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


class MessageRole(str, Enum):
    """
    Role shown to chat clients.

    Only two values: anything not written by the user is shown as the assistant.
    """

    USER = "user"
    ASSISTANT = "assistant"

    @classmethod
    def from_chat_role(cls, role: ChatRole) -> "MessageRole":
        return cls.USER if role == ChatRole.USER else cls.ASSISTANT


class ScriptStatus(str, Enum):
    """Video script review status."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class UserRole(str, Enum):
    """Actor role supplied by the authentication layer."""

    DOCTOR = "DOCTOR"
    ADMIN = "ADMIN"
