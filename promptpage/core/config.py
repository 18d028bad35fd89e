"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export OPENAI_API_KEY=sk-...
        export OPENAI_MODEL=gpt-4o-mini
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "PromptPage"

    # DEBUG: Enable debug mode (more verbose logging)
    DEBUG: bool = False

    # LOG_LEVEL: Level for the promptpage.* loggers
    LOG_LEVEL: str = "INFO"

    # CORS_ORIGINS: Origins allowed to call the API (the web UI)
    CORS_ORIGINS: List[str] = ["*"]

    # ---------------------------------------------------------------------------
    # AI/LLM PROVIDER SETTINGS
    # ---------------------------------------------------------------------------
    # OPENAI_API_KEY: Bearer credential for the chat-completions endpoint
    # - Empty means the generator is not configured; /api/generate answers 503
    OPENAI_API_KEY: str = ""

    # OPENAI_MODEL: Model override (sent verbatim as "model" in the request body)
    OPENAI_MODEL: str = "gpt-4o"

    # OPENAI_API_URL: Chat-completions endpoint
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"

    # GENERATION_DEADLINE_SECONDS: Per-request deadline passed by the HTTP layer
    # - None leaves only the fixed 60s client timeout in place
    GENERATION_DEADLINE_SECONDS: Optional[float] = None

    @property
    def log_level(self) -> str:
        """Effective level name; DEBUG=True always wins over LOG_LEVEL."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from promptpage.core.config import settings
settings = Settings()
