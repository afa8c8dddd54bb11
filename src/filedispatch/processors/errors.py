"""Error kinds raised by processors and the processor factory."""

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Closed set of failure kinds a processing run can report."""

    IO_ERROR = "io_error"
    UNSUPPORTED_MODE = "unsupported_mode"
    ALLOCATION_FAILURE = "allocation_failure"


class ProcessingError(Exception):
    """Base class for all expected processing failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileOpenError(ProcessingError):
    """Raised when an input file cannot be opened for reading."""

    kind = ErrorKind.IO_ERROR

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path = Path(path)
        message = f'Could not open "{path}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedModeError(ProcessingError):
    """Raised when the factory is asked for a mode it does not know."""

    kind = ErrorKind.UNSUPPORTED_MODE

    def __init__(self, mode: str, supported: list[str] | None = None):
        self.mode = mode
        message = f"Unsupported mode: {mode!r}"
        if supported:
            message = f"{message} (expected one of: {', '.join(supported)})"
        super().__init__(message)


class AllocationFailureError(ProcessingError):
    """Raised when a processor cannot allocate a resource it owns."""

    kind = ErrorKind.ALLOCATION_FAILURE
