"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Optional so the process still starts; every generation call fails without it.
    nvidia_api_key: SecretStr | None = None
    completion_base_url: str = "https://integrate.api.nvidia.com/v1"
    completion_model: str = "nvidia/llama-3.1-nemotron-nano-8b-v1"
    request_timeout_seconds: float = 60.0
    count_prompt_tokens: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
