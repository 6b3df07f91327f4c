"""
Unit tests for environment validation and logging setup.
"""

import logging

import pytest

from html_pdf_service.logging_config import configure_logging
from html_pdf_service.settings import VALID_LOG_LEVELS, validate_choice


class TestValidateChoice:
    def test_accepts_and_normalizes(self):
        assert validate_choice(" DEBUG ", VALID_LOG_LEVELS, "LOG_LEVEL") == "debug"

    def test_rejects_unknown_value(self):
        with pytest.raises(ValueError) as exc_info:
            validate_choice("verbose", VALID_LOG_LEVELS, "LOG_LEVEL")
        message = str(exc_info.value)
        assert "LOG_LEVEL" in message
        assert "critical | error | warning | info | debug" in message
        assert "'verbose'" in message


@pytest.fixture
def fresh_package_logger():
    """Detach whatever handlers the package logger has and restore them afterwards."""
    logger = logging.getLogger("html_pdf_service")
    saved = (list(logger.handlers), logger.level, logger.propagate, getattr(logger, "_html_pdf_configured", False))
    logger.handlers = []
    logger._html_pdf_configured = False
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers, logger.level, logger.propagate, logger._html_pdf_configured = saved


class TestConfigureLogging:
    def test_writes_one_file_per_level(self, fresh_package_logger, tmp_path):
        logs_dir = tmp_path / "logs"
        configure_logging("warning", str(logs_dir))

        child = logging.getLogger("html_pdf_service.tests")
        child.info("info message")
        child.error("error message")
        for handler in fresh_package_logger.handlers:
            handler.flush()

        assert sorted(p.name for p in logs_dir.iterdir()) == ["debug.log", "error.log", "info.log", "warning.log"]
        assert "info message" in (logs_dir / "info.log").read_text(encoding="utf-8")
        assert "info message" in (logs_dir / "debug.log").read_text(encoding="utf-8")
        assert "info message" not in (logs_dir / "error.log").read_text(encoding="utf-8")
        assert "error message" in (logs_dir / "error.log").read_text(encoding="utf-8")

    def test_console_only_and_idempotent(self, fresh_package_logger, tmp_path):
        configure_logging("debug", str(tmp_path / "logs"), to_files=False)
        configure_logging("debug", str(tmp_path / "logs"), to_files=False)

        assert len(fresh_package_logger.handlers) == 1
        assert fresh_package_logger.handlers[0].level == logging.DEBUG
        assert not (tmp_path / "logs").exists()
