"""Utility modules for filedispatch."""

from .logging import get_console, get_logger, print_error, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "get_console",
    "print_error",
]
