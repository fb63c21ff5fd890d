"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Analysis defaults when a request leaves them out
    default_window: int = 10
    default_threshold: float = 125.0

    # Largest curve accepted by the API
    max_points: int = 200_000

    model_config = {"env_prefix": "CURVECUT_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
