"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    LogConfig,
    RunConfig,
    VALID_LOG_LEVELS,
)

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "LogConfig",
    "RunConfig",
    "VALID_LOG_LEVELS",
]
