"""Tests for logging setup."""

import logging

import pytest

from filedispatch.utils.logging import get_console, get_logger, print_error, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put default logging back after each test."""
    yield
    setup_logging()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler_writes_records(self, tmp_path):
        """Test that file logging writes formatted records to the log file."""
        setup_logging(level="INFO", log_dir=tmp_path, file_enabled=True, console_enabled=False)

        get_logger("processors.encryptor").info("hello from the encryptor")

        log_text = (tmp_path / "filedispatch.log").read_text(encoding="utf-8")
        assert "INFO" in log_text
        assert "filedispatch.processors.encryptor" in log_text
        assert "hello from the encryptor" in log_text

    def test_level_filters_file_records(self, tmp_path):
        """Test that records below the configured level are dropped."""
        setup_logging(level="WARNING", log_dir=tmp_path, file_enabled=True, console_enabled=False)

        get_logger("core.runner").info("quiet")
        get_logger("core.runner").warning("loud")

        log_text = (tmp_path / "filedispatch.log").read_text(encoding="utf-8")
        assert "quiet" not in log_text
        assert "loud" in log_text

    def test_log_dir_created(self, tmp_path):
        """Test that a missing log directory is created."""
        log_dir = tmp_path / "nested" / "logs"

        setup_logging(log_dir=log_dir, file_enabled=True, console_enabled=False)

        assert (log_dir / "filedispatch.log").exists()

    def test_rotation(self, tmp_path):
        """Test that the log file rotates once it reaches max_bytes."""
        setup_logging(
            level="INFO",
            log_dir=tmp_path,
            max_bytes=200,
            backup_count=2,
            file_enabled=True,
            console_enabled=False,
        )
        logger = get_logger("core.runner")

        for i in range(20):
            logger.info(f"record number {i} with some padding text")

        assert (tmp_path / "filedispatch.log.1").exists()
        assert not (tmp_path / "filedispatch.log.3").exists()

    def test_setup_replaces_handlers(self, tmp_path):
        """Test that calling setup again does not stack handlers."""
        setup_logging(log_dir=tmp_path, file_enabled=True, console_enabled=True)
        setup_logging(log_dir=tmp_path, file_enabled=True, console_enabled=True)

        assert len(get_logger().handlers) == 2

    def test_no_handlers_when_disabled(self):
        """Test that disabling console and file logging leaves no handlers."""
        setup_logging(console_enabled=False, file_enabled=False)

        assert get_logger().handlers == []

    def test_unknown_level_falls_back_to_warning(self):
        """Test that an unknown level name is treated as WARNING."""
        setup_logging(level="LOUD", console_enabled=False)

        assert get_logger().level == logging.WARNING


class TestGetLogger:
    """Tests for get_logger."""

    def test_package_logger(self):
        """Test that no name returns the package logger."""
        assert get_logger().name == "filedispatch"

    def test_module_name_not_doubled(self):
        """Test that a module __name__ maps onto the package hierarchy once."""
        assert get_logger("filedispatch.processors.base").name == "filedispatch.processors.base"

    def test_short_name(self):
        """Test that a short name becomes a child of the package logger."""
        assert get_logger("cli").name == "filedispatch.cli"


class TestPrintError:
    """Tests for print_error."""

    def test_prints_to_stdout(self, capsys):
        """Test that diagnostics go to the output console."""
        print_error("Could not open [missing]")

        out = capsys.readouterr().out
        assert "✗ Error: Could not open [missing]" in out

    def test_console_is_shared(self):
        """Test that get_console returns the same console every time."""
        assert get_console() is get_console()
