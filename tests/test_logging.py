"""Tests for logging setup."""

import logging

from gql_sdlgen.utils.logging import LOG_LEVEL_ENV, get_logger, setup_logging


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        setup_logging()

        logger = logging.getLogger("gql_sdlgen")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logging_explicit_level(self):
        setup_logging(level="debug")
        assert logging.getLogger("gql_sdlgen").level == logging.DEBUG

    def test_setup_logging_invalid_level(self):
        setup_logging(level="INVALID")
        assert logging.getLogger("gql_sdlgen").level == logging.WARNING

    def test_setup_logging_environment_variable(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        setup_logging()
        assert logging.getLogger("gql_sdlgen").level == logging.INFO

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("gql_sdlgen").handlers) == 1

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "sdlgen.log"
        setup_logging(level="INFO", log_file=str(log_file))

        logger = logging.getLogger("gql_sdlgen")
        handler_types = [type(h).__name__ for h in logger.handlers]
        assert "StreamHandler" in handler_types
        assert "FileHandler" in handler_types

        get_logger("test").info("Test message")
        for handler in logger.handlers:
            handler.flush()
        assert "Test message" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()


class TestGetLogger:

    def test_namespaced(self):
        assert get_logger("cli").name == "gql_sdlgen.cli"
