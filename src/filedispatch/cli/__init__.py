"""Command-line interface for filedispatch."""

from .main import main

__all__ = ["main"]
