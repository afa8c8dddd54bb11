"""Core module containing the batch runner."""

from .runner import BatchResult, BatchRunner, FileResult

__all__ = [
    "BatchRunner",
    "BatchResult",
    "FileResult",
]
