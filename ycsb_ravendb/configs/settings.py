"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the binding
"""

from functools import lru_cache

from pydantic import Field

from ycsb_ravendb.configs.base import BaseSettings
from ycsb_ravendb.configs.ravendb import RavenDBSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    ravendb: RavenDBSettings = Field(default_factory=RavenDBSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Environment variables are loaded once, on first call.

    Returns:
        Settings: Settings instance

    Usage:
        from ycsb_ravendb.configs import get_settings
        settings = get_settings()
    """
    return Settings()
