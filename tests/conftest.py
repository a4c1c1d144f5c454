"""
Pytest configuration for rulechain tests.
"""

import pytest

from rulechain.config import reset_config
from rulechain.utils import logger as logger_module


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    """Reload config and logger from a clean environment for every test."""
    # setenv first so teardown also removes values a .env load put there
    for var in ("RULECHAIN_LOG_LEVEL", "RULECHAIN_LOG_DIR", "RULECHAIN_TRACE_RUNS"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    reset_config()
    logger_module._logger = None
    logger_module.RuleLogger._instance = None
    logger_module.RuleLogger._initialized = False
    yield
    reset_config()
    logger_module._logger = None
    logger_module.RuleLogger._instance = None
    logger_module.RuleLogger._initialized = False


class Recorder:
    """Collects action names in firing order."""

    def __init__(self):
        self.fired: list[str] = []

    def action(self, name: str):
        def _fire():
            self.fired.append(name)
        return _fire


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
