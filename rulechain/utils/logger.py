"""
Logging system for rulechain.
Provides human-readable logs with console output and an optional daily file.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Color a copy so other handlers see the plain record
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        colored.levelname = f"{color}{record.levelname}{Colors.RESET}"
        colored.msg = f"{color}{record.getMessage()}{Colors.RESET}"
        colored.args = None
        return super().format(colored)


class RuleLogger:
    """
    Central logging system for rulechain.

    Features:
    - Console output with colors
    - Optional plain-text daily log file
    - Structured one-line records for fired cases
    """

    _instance: Optional['RuleLogger'] = None
    _initialized: bool = False
    # Handlers this class attached, so a re-setup only removes its own
    _installed_handlers: list = []

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "", log_level: str = "INFO"):
        if RuleLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("rulechain", log_level)
        # Child logger, handlers inherited from "rulechain"
        self.case_logger = logging.getLogger("rulechain.cases")

        RuleLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        for handler in RuleLogger._installed_handlers:
            logger.removeHandler(handler)
            handler.close()
        RuleLogger._installed_handlers = []

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)
        RuleLogger._installed_handlers.append(console_handler)

        if self.log_dir is not None:
            log_file = self.log_dir / f"rulechain_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)
            RuleLogger._installed_handlers.append(file_handler)

        return logger

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)

    def case(self, status: str, index: int, label: str = "", **kwargs):
        """
        Log a case outcome with structured format.

        Args:
            status: FIRED, SKIPPED, FAILED
            index: Position of the case in its CaseList
            label: Case label (e.g. "10 > 5")
            **kwargs: Additional fields
        """
        parts = [
            f"[{status}]",
            f"index={index}",
            f"case={label or '<predicate>'}",
        ]
        for key, value in kwargs.items():
            parts.append(f"{key}={value}")

        msg = " | ".join(parts)
        if status == "FAILED":
            self.case_logger.error(msg)
        else:
            self.case_logger.debug(msg)


# Global logger instance
_logger: Optional[RuleLogger] = None


def get_logger(log_dir: Optional[str] = None, log_level: Optional[str] = None) -> RuleLogger:
    """Get or create the global logger instance, defaulting to config values."""
    global _logger
    if _logger is None:
        if log_dir is None or log_level is None:
            from ..config import get_config
            log_config = get_config().log
            log_dir = log_config.log_dir if log_dir is None else log_dir
            log_level = log_config.level if log_level is None else log_level
        _logger = RuleLogger(log_dir, log_level)
    return _logger


def setup_logger(log_dir: str = "", log_level: str = "INFO") -> RuleLogger:
    """Initialize the logger with custom settings."""
    global _logger
    RuleLogger._initialized = False
    RuleLogger._instance = None
    _logger = RuleLogger(log_dir, log_level)
    return _logger
