"""API routers."""

from app.api import chat, scripts

__all__ = [
    "chat",
    "scripts",
]
