"""Application settings via Pydantic BaseSettings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from serverapi.exceptions import ConfigError


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "SERVERAPI_"}

    # App
    log_level: str = "INFO"

    # Multi-tenancy
    tenant_qualified_urls_enabled: bool = False

    def is_tenant_qualified_urls_enabled(self) -> bool:
        return self.tenant_qualified_urls_enabled


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    settings = Settings()
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        msg = f"Unknown SERVERAPI_LOG_LEVEL: {settings.log_level}"
        raise ConfigError(msg)
    return settings
