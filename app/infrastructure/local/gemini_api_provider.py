"""
Gemini API provider.

Uses Gemini API with API Key (no GCP project required).
"""

from typing import Sequence

from google import genai
from google.genai.types import Content, GenerateContentConfig, Part

from app.core.config import get_settings
from app.core.exceptions import LLMError
from app.core.logger import logger
from app.interfaces.llm_provider import ILLMProvider
from app.models.chat_session import ConversationTurn
from app.models.enums import ChatRole


class GeminiAPIProvider(ILLMProvider):
    """Gemini API provider using API Key."""

    def __init__(self, model_name: str):
        """
        Initialize Gemini API provider.

        Args:
            model_name: Gemini model name (e.g., "gemini-2.0-flash")
        """
        self._model_name = model_name
        self._settings = get_settings()

        if not self._settings.GOOGLE_API_KEY:
            raise ValueError(
                "GOOGLE_API_KEY is required for Gemini API provider. "
                "Get your API key from https://aistudio.google.com/apikey"
            )
        self._client = genai.Client(api_key=self._settings.GOOGLE_API_KEY)

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        return f"Gemini API ({self._model_name})"

    @staticmethod
    def _to_contents(history: Sequence[ConversationTurn], user_input: str) -> list[Content]:
        # Gemini only knows "user" and "model"; system turns go through system_instruction
        contents = [
            Content(
                role="user" if turn.role == ChatRole.USER else "model",
                parts=[Part(text=turn.content)],
            )
            for turn in history
            if turn.role != ChatRole.SYSTEM
        ]
        contents.append(Content(role="user", parts=[Part(text=user_input)]))
        return contents

    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ConversationTurn],
        user_input: str,
    ) -> str:
        """Generate the next assistant reply."""
        config_kwargs: dict = {
            "temperature": self._settings.LLM_TEMPERATURE,
            "max_output_tokens": self._settings.LLM_MAX_TOKENS,
        }
        if system_prompt:
            config_kwargs["system_instruction"] = system_prompt

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=self._to_contents(history, user_input),
                config=GenerateContentConfig(**config_kwargs),
            )
        except Exception as exc:
            logger.error(f"GenAI request failed ({self._model_name}): {exc}")
            raise LLMError("LLM request failed", details=str(exc)) from exc

        text = response.text or ""
        if not text:
            raise LLMError("LLM returned an empty response")
        return text
