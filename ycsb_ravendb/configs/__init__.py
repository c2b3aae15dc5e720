"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from ycsb_ravendb.configs.ravendb import RavenDBSettings
from ycsb_ravendb.configs.settings import Settings, get_settings

__all__ = ["RavenDBSettings", "Settings", "get_settings"]
