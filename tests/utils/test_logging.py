"""Tests for logging helpers."""

import logging

from productmeta.config import reset_settings
from productmeta.utils.logging import format_context, setup_logging


class TestFormatContext:
    def test_appends_bound_context(self):
        event = format_context(
            None, "info", {"event": "Loaded", "package_path": "compute", "level": "info"}
        )
        assert event["event"] == "Loaded [package_path=compute]"

    def test_no_context(self):
        event = format_context(None, "info", {"event": "Loaded"})
        assert event["event"] == "Loaded"


class TestSetupLogging:
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        setup_logging()
        assert logging.getLogger("productmeta").level == logging.DEBUG

        monkeypatch.setenv("LOG_LEVEL", "INFO")
        reset_settings()
        setup_logging()
        assert logging.getLogger("productmeta").level == logging.INFO
