"""
Observability module.

Provides logging configuration and structured-context logging helpers.
"""

from ycsb_ravendb.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
