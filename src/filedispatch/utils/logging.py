"""Logging infrastructure with Rich console output and rotating file logs."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

DISPATCH_THEME = Theme({"error": "red bold"})


class DispatchLogger:
    """Process-wide logger holding the output and diagnostic consoles."""

    _instance: Optional["DispatchLogger"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            # Processor output goes to stdout, log records to stderr
            self.console = Console(theme=DISPATCH_THEME)
            self.log_console = Console(theme=DISPATCH_THEME, stderr=True)
            self.logger = logging.getLogger("filedispatch")
            self._initialized = True

    def setup(
        self,
        level: str = "WARNING",
        log_dir: Optional[Path] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        console_enabled: bool = True,
        file_enabled: bool = False,
    ):
        """
        Configure logging handlers and formatters.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files
            max_bytes: Maximum size of each log file before rotation
            backup_count: Number of rotated log files to keep
            console_enabled: Enable console (Rich) logging on stderr
            file_enabled: Enable file logging
        """
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        log_level = getattr(logging, level.upper(), logging.WARNING)
        self.logger.setLevel(log_level)
        self.logger.propagate = False

        if console_enabled:
            console_handler = RichHandler(
                console=self.log_console,
                rich_tracebacks=True,
                show_time=True,
                show_path=False,
                markup=False,
            )
            console_handler.setLevel(log_level)
            self.logger.addHandler(console_handler)

        if file_enabled:
            log_dir = Path(log_dir) if log_dir is not None else Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_dir / "filedispatch.log",
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(log_level)
            self.logger.addHandler(file_handler)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Return the package logger, or a child of it when ``name`` is given."""
        if name:
            if name.startswith("filedispatch."):
                name = name[len("filedispatch."):]
            return self.logger.getChild(name)
        return self.logger

    def print_error(self, message: str):
        """Print an error message with red styling."""
        self.console.print(
            f"✗ Error: {message}", style="error", markup=False, highlight=False, soft_wrap=True
        )


_logger_instance: Optional[DispatchLogger] = None


def _get_instance() -> DispatchLogger:
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DispatchLogger()
        _logger_instance.setup()
    return _logger_instance


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional logger name for component-specific logging

    Returns:
        Configured logger instance
    """
    return _get_instance().get_logger(name)


def setup_logging(
    level: str = "WARNING",
    log_dir: Optional[Path] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    console_enabled: bool = True,
    file_enabled: bool = False,
):
    """Configure global logging settings. See ``DispatchLogger.setup``."""
    _get_instance().setup(level, log_dir, max_bytes, backup_count, console_enabled, file_enabled)


def get_console() -> Console:
    """Get the stdout Rich console used for processor and CLI output."""
    return _get_instance().console


def print_error(message: str):
    """Print a one-line error diagnostic."""
    _get_instance().print_error(message)

