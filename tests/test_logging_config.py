# -*- coding: utf-8 -*-
"""
tests/test_logging_config.py
==============================
Tests for core.logging_config — handler setup and colored formatting.
"""
import logging

import pytest
from core.logging_config import ColoredFormatter, LoggingConfig


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:

    def test_level_applied(self, isolated_config, restore_root_logger):
        root = LoggingConfig.setup_logging(log_level="warning", enable_console=False)
        assert root.level == logging.WARNING
        assert root.handlers == []

    def test_level_from_environment(self, isolated_config, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        root = LoggingConfig.setup_logging(enable_console=False)
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back(self, isolated_config, restore_root_logger):
        root = LoggingConfig.setup_logging(log_level="chatty", enable_console=False)
        assert root.level == logging.INFO

    def test_console_handler(self, isolated_config, restore_root_logger):
        root = LoggingConfig.setup_logging(log_level="info")
        assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)

    def test_file_handler(self, isolated_config, restore_root_logger):
        log_dir = isolated_config / "logs"
        root = LoggingConfig.setup_logging(log_level="info", log_dir=str(log_dir),
                                           enable_console=False)
        logging.getLogger("services.policy_evaluator").warning("written to file")
        for h in root.handlers:
            h.flush()
        log_file = log_dir / LoggingConfig.LOG_FILE_NAME
        assert log_file.exists()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_log_dir_from_config(self, isolated_config, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_DIR", str(isolated_config / "cfg_logs"))
        LoggingConfig.setup_logging(log_level="info", enable_console=False)
        assert (isolated_config / "cfg_logs" / LoggingConfig.LOG_FILE_NAME).exists()


class TestColoredFormatter:

    def test_level_colored(self):
        fmt = ColoredFormatter("%(levelname)s %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        out = fmt.format(record)
        assert "\033[31m" in out
        assert "boom" in out

    def test_original_record_untouched(self):
        fmt = ColoredFormatter("%(levelname)s")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        fmt.format(record)
        assert record.levelname == "INFO"
