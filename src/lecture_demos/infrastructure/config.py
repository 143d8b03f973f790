"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    The ``ai_*`` fields configure the chat demo.  They are optional so the
    forecast demo can run on its own; the chat endpoint reports a server
    error until both the URI and the key are provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ai_deployment_uri: str | None = None
    ai_api_key: SecretStr | None = None
    ai_deployment_model_name: str = "gpt-5-mini"
    ai_api_version: str | None = None
    # Higher temperature / top-p → more varied output, lower → more deterministic.
    ai_temperature: float = 1.0
    ai_top_p: float = 1.0
    ai_max_output_tokens: int = 500
    forecast_seed_count: int = 5
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def missing_ai_settings(self) -> list[str]:
        """Names of the required AI settings that are unset or blank."""
        missing: list[str] = []
        if not (self.ai_deployment_uri or "").strip():
            missing.append("ai_deployment_uri")
        if self.ai_api_key is None or not self.ai_api_key.get_secret_value().strip():
            missing.append("ai_api_key")
        return missing


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
