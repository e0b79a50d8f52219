from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Environment configuration for the assetbook service."""

    register_path: Optional[str] = Field(
        default=None,
        alias="ASSETBOOK_REGISTER_PATH",
        description="JSON file backing the asset register. Unset keeps the register in memory.",
    )
    currency: str = Field(default="NGN", alias="ASSETBOOK_CURRENCY")
    log_level: str = Field(default="INFO", alias="ASSETBOOK_LOG_LEVEL")

    model_config = {"extra": "ignore", "populate_by_name": True}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings lazily so tests can override them."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
