"""Tests for CLI global logging configuration."""

import logging
import os
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from showarr.cli import app
from showarr.config import Config, LoggingConfig
from showarr.logging_config import configure_logging, parse_log_level

runner = CliRunner()


class TestGlobalLogLevel:
    """Tests for global --log-level flag."""

    @patch("showarr.cli.configure_logging")
    def test_global_log_level_flag_configures_logging(self, mock_configure: MagicMock) -> None:
        """Global --log-level flag should configure logging before command runs."""
        result = runner.invoke(app, ["--log-level", "debug", "version"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with("debug")

    @patch("showarr.cli.configure_logging")
    def test_global_log_level_short_flag(self, mock_configure: MagicMock) -> None:
        """Short -l flag should work as alias for --log-level."""
        result = runner.invoke(app, ["-l", "warning", "version"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with("warning")

    @patch("showarr.cli.configure_logging")
    def test_global_log_level_invalid_exits_with_error(self, mock_configure: MagicMock) -> None:
        """Invalid log level should exit with error."""
        result = runner.invoke(app, ["--log-level", "verbose", "version"])

        assert result.exit_code == 1
        assert "verbose" in result.output.lower()
        mock_configure.assert_not_called()

    @patch("showarr.cli.configure_logging")
    def test_global_log_level_case_insensitive(self, mock_configure: MagicMock) -> None:
        """Log level should be case insensitive."""
        result = runner.invoke(app, ["--log-level", "DEBUG", "version"])

        assert result.exit_code == 0
        mock_configure.assert_called_once()


class TestLogLevelPriority:
    """Tests for log level priority chain: CLI > env > config > default."""

    @patch("showarr.cli.configure_logging")
    @patch.dict("os.environ", {"SHOWARR_LOG_LEVEL": "warning"})
    def test_cli_overrides_env_var(self, mock_configure: MagicMock) -> None:
        """CLI flag should override environment variable."""
        result = runner.invoke(app, ["--log-level", "debug", "version"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with("debug")

    @patch("showarr.cli.configure_logging")
    @patch("showarr.cli.Config.load")
    @patch.dict("os.environ", {"SHOWARR_LOG_LEVEL": "error"}, clear=False)
    def test_env_overrides_config(
        self, mock_config_load: MagicMock, mock_configure: MagicMock
    ) -> None:
        """Environment variable should override config file."""
        mock_config_load.return_value = Config(logging=LoggingConfig(level="debug"))

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with("error")

    @patch("showarr.cli.configure_logging")
    @patch("showarr.cli.Config.load")
    @patch.dict("os.environ", {}, clear=True)
    def test_config_overrides_default(
        self, mock_config_load: MagicMock, mock_configure: MagicMock
    ) -> None:
        """Config file should override default when no CLI or env."""
        os.environ.pop("SHOWARR_LOG_LEVEL", None)
        mock_config_load.return_value = Config(logging=LoggingConfig(level="warning"))

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with("warning")


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    httpx_level = logging.getLogger("httpx").level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
    logging.getLogger("httpcore").setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_single_handler(self, restore_root_logger: logging.Logger) -> None:
        """Should install one stream handler at the requested level."""
        configure_logging("warning")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)

    def test_quiets_httpx_unless_debug(self, restore_root_logger: logging.Logger) -> None:
        """httpx request logs are only shown at DEBUG."""
        configure_logging("info")
        assert logging.getLogger("httpx").level == logging.WARNING

        configure_logging("debug")
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_invalid_level_raises(self) -> None:
        """Unknown level names should be rejected."""
        with pytest.raises(ValueError, match="verbose"):
            parse_log_level("verbose")

    def test_parse_is_case_insensitive(self) -> None:
        """Level names should be accepted in any case."""
        assert parse_log_level("ERROR") == logging.ERROR
        assert parse_log_level("Info") == logging.INFO
