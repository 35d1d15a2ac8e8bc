"""
LiteLLM provider implementation.

Supports OpenAI, Bedrock, and other providers via LiteLLM.
Includes support for custom endpoints (api_base) for proxy servers.
"""

import os
from typing import Any, Optional, Sequence

import litellm

from app.core.config import get_settings
from app.core.exceptions import LLMError
from app.core.logger import logger
from app.interfaces.llm_provider import ILLMProvider
from app.models.chat_session import ConversationTurn
from app.models.enums import ChatRole

# LiteLLM chat roles; stored tool turns are replayed as assistant text
_ROLE_MAP = {
    ChatRole.USER: "user",
    ChatRole.ASSISTANT: "assistant",
    ChatRole.SYSTEM: "system",
    ChatRole.TOOL: "assistant",
}


def build_messages(
    system_prompt: str,
    history: Sequence[ConversationTurn],
    user_input: str,
) -> list[dict[str, str]]:
    """Lay out system prompt, prior turns and the new input as chat messages."""
    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    for turn in history:
        messages.append({"role": _ROLE_MAP[turn.role], "content": turn.content})
    messages.append({"role": "user", "content": user_input})
    return messages


class LiteLLMProvider(ILLMProvider):
    """LiteLLM provider with custom endpoint support."""

    def __init__(
        self,
        model_name: str,
        api_base: Optional[str] = None,
        api_key: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        """
        Initialize LiteLLM provider.

        Args:
            model_name: LiteLLM model identifier (e.g., "gpt-4.1-mini")
            api_base: Custom API endpoint URL (optional, for proxy servers)
                     Note: Do NOT include /v1 suffix - LiteLLM adds it automatically
            api_key: Custom API key (optional, overrides default)
            temperature: Sampling temperature (defaults to LLM_TEMPERATURE)
            max_tokens: Reply length cap (defaults to LLM_MAX_TOKENS)
        """
        self._model_name = model_name
        self._settings = get_settings()
        self._api_base = api_base or self._settings.LITELLM_API_BASE or None
        self._api_key = api_key or self._settings.LITELLM_API_KEY or None
        self._temperature = (
            temperature if temperature is not None else self._settings.LLM_TEMPERATURE
        )
        self._max_tokens = max_tokens or self._settings.LLM_MAX_TOKENS

        # Enable debug logging if DEBUG is set
        if self._settings.DEBUG:
            os.environ["LITELLM_LOG"] = "DEBUG"

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        if self._api_base:
            return f"LiteLLM ({self._model_name} @ {self._api_base})"
        return f"LiteLLM ({self._model_name})"

    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ConversationTurn],
        user_input: str,
    ) -> str:
        """Generate the next assistant reply via litellm.acompletion."""
        kwargs: dict[str, Any] = {
            "model": self._model_name,
            "messages": build_messages(system_prompt, history, user_input),
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }
        if self._api_base:
            kwargs["api_base"] = self._api_base
        if self._api_key:
            kwargs["api_key"] = self._api_key

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            logger.error(f"LiteLLM completion failed ({self._model_name}): {e}")
            raise LLMError("LLM request failed", details=str(e)) from e

        text = response.choices[0].message.content if response.choices else None
        if not text:
            raise LLMError("LLM returned an empty response")
        return text
