"""File processors and the factory that builds them."""

from .base import FileProcessor, FileReadingProcessor, ProcessorKind, read_first_token
from .compressor import CompressionParams, FileCompressor
from .encoder import FileEncoder
from .encryptor import EncryptionKey, FileEncryptor
from .errors import (
    AllocationFailureError,
    ErrorKind,
    FileOpenError,
    ProcessingError,
    UnsupportedModeError,
)
from .factory import DEFAULT_COMPRESSION_PARAMS, ProcessorFactory, get_processor_factory
from .identity import IdentityProcessor

__all__ = [
    "ProcessorKind",
    "FileProcessor",
    "FileReadingProcessor",
    "read_first_token",
    "IdentityProcessor",
    "FileEncoder",
    "FileCompressor",
    "CompressionParams",
    "FileEncryptor",
    "EncryptionKey",
    "ProcessorFactory",
    "get_processor_factory",
    "DEFAULT_COMPRESSION_PARAMS",
    "ErrorKind",
    "ProcessingError",
    "FileOpenError",
    "UnsupportedModeError",
    "AllocationFailureError",
]
