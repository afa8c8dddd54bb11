"""
filedispatch - apply one of a closed set of file processors to a list of files.

A mode name selects the processor (identity, encode, compress, encrypt); the
processor is built by a process-wide factory and driven over each path in
order.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import DispatchConfig, get_config_manager
from .core import BatchResult, BatchRunner, FileResult
from .processors import (
    AllocationFailureError,
    CompressionParams,
    ErrorKind,
    FileCompressor,
    FileEncoder,
    FileEncryptor,
    FileOpenError,
    FileProcessor,
    IdentityProcessor,
    ProcessingError,
    ProcessorFactory,
    ProcessorKind,
    UnsupportedModeError,
    get_processor_factory,
)
from .utils.logging import get_logger

__all__ = [
    "get_config_manager",
    "get_logger",
    "DispatchConfig",
    # Processors
    "ProcessorKind",
    "FileProcessor",
    "IdentityProcessor",
    "FileEncoder",
    "FileCompressor",
    "CompressionParams",
    "FileEncryptor",
    # Factory
    "ProcessorFactory",
    "get_processor_factory",
    # Runner
    "BatchRunner",
    "BatchResult",
    "FileResult",
    # Errors
    "ErrorKind",
    "ProcessingError",
    "FileOpenError",
    "UnsupportedModeError",
    "AllocationFailureError",
]
