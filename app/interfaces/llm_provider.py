"""
LLM provider interface.

Defines the contract for LLM (Large Language Model) access.
Implementations: LiteLLM (OpenAI, Bedrock, etc.), Gemini API
"""

from abc import ABC, abstractmethod
from typing import Sequence

from app.models.chat_session import ConversationTurn


class ILLMProvider(ABC):
    """Abstract interface for LLM providers."""

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Get the human-readable model name.

        Returns:
            Model name string for logging/display
        """
        pass

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ConversationTurn],
        user_input: str,
    ) -> str:
        """
        Generate the next assistant reply.

        Args:
            system_prompt: Fixed instructions placed before the history
            history: Prior turns, oldest first
            user_input: Newest user message

        Returns:
            Generated text

        Raises:
            LLMError: the provider call failed or returned nothing
        """
        pass
