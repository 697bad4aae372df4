"""
mime_description/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the container runtime injects these in deployment.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "MIME Description API"
    app_version: str = "0.11.1"
    debug: bool = False

    # ── HTTP surface ───────────────────────────────────────────────────────────
    api_prefix: str = "/descriptions"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single shared instance; import this everywhere.
settings = Settings()
