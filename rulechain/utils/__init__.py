"""
Utility modules.
"""

from .logger import get_logger, setup_logger, RuleLogger

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "RuleLogger",
]
