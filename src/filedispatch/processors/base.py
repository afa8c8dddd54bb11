"""Processor interface and the shared file-reading discipline."""

import re
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from rich.console import Console

from ..utils.logging import get_console, get_logger
from .errors import FileOpenError

logger = get_logger(__name__)

# Token separators are the C-locale whitespace set only
TOKEN_SEPARATORS = " \t\n\v\f\r"
_SEPARATOR_RE = re.compile(r"[ \t\n\v\f\r]+")


class ProcessorKind(str, Enum):
    """Modes the factory knows how to build."""

    IDENTITY = "identity"
    ENCODE = "encode"
    COMPRESS = "compress"
    ENCRYPT = "encrypt"


def read_first_token(file_path: str | Path) -> str:
    """
    Read the first whitespace-delimited token of a file.

    The file is streamed line by line and closed before returning, on success
    and on failure alike.

    Args:
        file_path: Path to the file

    Returns:
        The first token, or an empty string for an empty or blank file

    Raises:
        FileOpenError: If the file cannot be opened or read
    """
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.lstrip(TOKEN_SEPARATORS)
                if line:
                    return _SEPARATOR_RE.split(line, maxsplit=1)[0]
    except OSError as e:
        raise FileOpenError(file_path, e.strerror) from e
    return ""


class FileProcessor(ABC):
    """
    A strategy applied to one file at a time.

    Processors are owned by whoever asked the factory for them and should be
    used as context managers so per-variant resources are released.
    """

    kind: ProcessorKind

    def __init__(self, console: Console | None = None):
        self._console = console

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = get_console()
        return self._console

    @abstractmethod
    def process(self, file_path: str | Path) -> None:
        """
        Process a single file.

        Raises:
            ProcessingError: If the file cannot be processed
        """

    def close(self) -> None:
        """Release resources held by the processor. Safe to call repeatedly."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def emit(self, description: str) -> None:
        """Write a one-line description of a simulated transform."""
        # Written to the console's stream directly: Rich Text drops control characters
        stream = self.console.file
        stream.write(f"{description}\n")
        stream.flush()


class FileReadingProcessor(FileProcessor):
    """Processor that reads the first token of a file and transforms it."""

    def process(self, file_path: str | Path) -> None:
        content = read_first_token(file_path)
        logger.debug(f"Read {len(content)} characters from {file_path}")
        self._transform(content)

    @abstractmethod
    def _transform(self, content: str) -> None:
        """Apply the variant-specific transform to the file content."""
