"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Product store
    store_backend: str = "sql"  # "sql" or "memory"
    database_url: str = "postgresql+asyncpg://showroom:showroom_dev_password@db:5432/showroom"
    store_timeout_seconds: float = 5.0

    # Admin login
    admin_user: str | None = None
    admin_pass: str | None = None
    admin_token: str = "admin"

    # Generative text
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
