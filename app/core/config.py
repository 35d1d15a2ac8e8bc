"""
Application configuration using Pydantic Settings.

Environment-based infrastructure switching is controlled by the ENVIRONMENT variable.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "production"] = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Database
    # ===========================================
    DATABASE_URL: str = "sqlite+aiosqlite:///./scriptdesk.db"

    # ===========================================
    # LLM Configuration
    # ===========================================
    # LLM Provider: "litellm" | "gemini-api"
    # - litellm: LiteLLM (OpenAI, Bedrock, etc. with optional custom endpoint)
    # - gemini-api: Gemini API (API Key)
    LLM_PROVIDER: Literal["litellm", "gemini-api"] = "litellm"

    # LiteLLM model identifier (for litellm provider)
    LITELLM_MODEL: str = "gpt-4.1-mini"

    # LiteLLM custom endpoint (optional, for proxy servers)
    LITELLM_API_BASE: str = ""

    # LiteLLM custom API key (optional, for custom endpoints)
    LITELLM_API_KEY: str = ""

    # Gemini model name (for gemini-api provider)
    GEMINI_MODEL: str = "gemini-2.0-flash"

    # Google API Key (for gemini-api provider)
    GOOGLE_API_KEY: str = ""

    LLM_TEMPERATURE: float = 0.5
    LLM_MAX_TOKENS: int = 1000

    # Static intake prompt, read once at startup
    SYSTEM_PROMPT_PATH: str = "./system-prompt.txt"

    # ===========================================
    # Chat
    # ===========================================
    CHAT_MESSAGE_MAX_LENGTH: int = 4000

    # ===========================================
    # Auth (session tokens)
    # ===========================================
    AUTH_PROVIDER: Literal["mock", "jwt"] = "mock"
    JWT_SECRET: str = ""
    JWT_ISSUER: str = "scriptdesk"
    SESSION_TTL_MINUTES: int = 60 * 24

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == "local"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
