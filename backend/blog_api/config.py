"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults provided for every setting: works out-of-the-box with no .env

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - strict_not_found opt-in: unknown-id GET keeps the empty 200 response unless enabled
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    app_name: str = "Blog API"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080

    # Posts
    strict_not_found: bool = False
    id_start: int = 0

    @field_validator("id_start")
    @classmethod
    def check_id_start(cls, v: int) -> int:
        if v < 0:
            raise ValueError("id_start must be non-negative")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
