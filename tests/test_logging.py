"""Ensure logging setup does not crash and sets level."""

import logging
from unittest.mock import MagicMock

from objstore.core.logging import setup_logging


def test_setup_logging():
    setup_logging()
    logger = logging.getLogger()
    # Should configure without raising; ensure at least one handler attached
    assert logger.handlers


def test_setup_logging_accepts_explicit_level():
    setup_logging("debug")
    assert logging.getLogger().handlers


def test_setup_logging_reads_level_at_call_time(monkeypatch):
    basic_config = MagicMock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)
    monkeypatch.setenv("LOG_LEVEL", "warning")

    setup_logging()

    assert basic_config.call_args.kwargs["level"] == "WARNING"
