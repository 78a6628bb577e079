"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

# Value shipped in example env files; never a real key.
PLACEHOLDER_API_KEY = "MiniChef"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    openai_max_tokens: int = 500
    openai_temperature: float = 0.7
    history_limit: int = 14
    recipe_webhook_url: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def has_openai_credentials(api_key: str | None) -> bool:
    """Return true when an OpenAI key looks usable."""
    if api_key is None:
        return False
    cleaned = api_key.strip()
    return cleaned not in {"", PLACEHOLDER_API_KEY}
