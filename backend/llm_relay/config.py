"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All provider API keys come from environment variables (never hardcoded)
    - An empty key is treated as missing
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Model names and base URLs are settings, not constants: proxies and tests
      point them elsewhere without code changes
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from llm_relay.core.domain_types import Provider


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Provider keys (GEMINI_API_KEY, CLAUDE_API_KEY, ...)
    gemini_api_key: str = ""
    claude_api_key: str = ""
    mistral_api_key: str = ""
    groq_api_key: str = ""

    # Models
    gemini_model: str = "gemini-2.0-flash"
    claude_model: str = "claude-3-5-sonnet-latest"
    mistral_model: str = "mistral-small-latest"
    groq_model: str = "llama-3.3-70b-versatile"
    claude_max_tokens: int = 1024

    # Base URLs
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    claude_base_url: str = "https://api.anthropic.com"
    mistral_base_url: str = "https://api.mistral.ai"
    groq_base_url: str = "https://api.groq.com"

    request_timeout_seconds: float = 60.0

    # Provider behind POST /api/generate
    default_provider: str = "gemini"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator(
        "gemini_api_key", "claude_api_key", "mistral_api_key", "groq_api_key",
        mode="before",
    )
    @classmethod
    def strip_key(cls, v: object) -> str:
        """Whitespace-only keys pasted into a dashboard count as missing."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator(
        "gemini_base_url", "claude_base_url", "mistral_base_url", "groq_base_url",
    )
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("default_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        """Fail at startup on a provider name the registry does not know."""
        v = v.strip().lower()
        if v not in {p.value for p in Provider}:
            raise ValueError(
                f"default_provider must be one of {sorted(p.value for p in Provider)}",
            )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
