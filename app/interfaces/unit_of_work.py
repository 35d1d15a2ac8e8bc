"""
Unit of work interface.

Groups chat turn and video script writes into one transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.interfaces.chat_message_repository import IChatMessageRepository
from app.interfaces.video_script_repository import IVideoScriptRepository


class IUnitOfWork(ABC):
    """
    Transaction scope over the chat repositories.

    Usage:
        async with uow_factory() as uow:
            await uow.messages.append(...)
            await uow.scripts.create(...)

    Leaving the block normally commits; leaving it with an exception rolls back.
    """

    messages: IChatMessageRepository
    scripts: IVideoScriptRepository

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None:
        pass
