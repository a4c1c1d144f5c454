"""
Configuration management for rulechain.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    # Empty = console only, no daily log file
    log_dir: str = ""

    def __post_init__(self):
        """Validate and normalize configuration."""
        self.level = self.level.upper().strip()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"RULECHAIN_LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}, got '{self.level}'"
            )
        self.log_dir = self.log_dir.strip()


@dataclass
class RunConfig:
    """Case run behaviour."""
    # Log every visited case at DEBUG, not just the ones that fire
    trace_runs: bool = False


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()
        self.run = self._load_run_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("RULECHAIN_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("RULECHAIN_LOG_DIR", ""),
        )

    def _load_run_config(self) -> RunConfig:
        """Load run configuration from environment."""
        return RunConfig(
            trace_runs=os.getenv("RULECHAIN_TRACE_RUNS", "false").lower() in ("1", "true", "yes"),
        )

    def summary(self) -> str:
        """Get a one-line configuration summary."""
        log_target = self.log.log_dir or "console"
        return (
            f"level={self.log.level} | log_target={log_target} | "
            f"trace_runs={self.run.trace_runs}"
        )


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config instance so the next get_config() reloads it."""
    Config._instance = None
