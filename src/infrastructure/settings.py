"""Library settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PaginationSettings(BaseSettings):
    """Central configuration for the pagination helpers."""

    model_config = {"env_prefix": "PAGEKIT_", "case_sensitive": False}

    # Pagination
    default_slot_per_page: int = Field(default=20, gt=0)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


def get_settings() -> PaginationSettings:
    """Return a freshly loaded settings instance."""
    return PaginationSettings()
