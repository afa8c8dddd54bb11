"""Factory that maps a mode name to a freshly built processor."""

import threading
from typing import Callable

from rich.console import Console

from ..utils.logging import get_logger
from .base import FileProcessor, ProcessorKind
from .compressor import CompressionParams, FileCompressor
from .encoder import FileEncoder
from .encryptor import FileEncryptor
from .errors import UnsupportedModeError
from .identity import IdentityProcessor

logger = get_logger(__name__)

DEFAULT_COMPRESSION_PARAMS = CompressionParams("Hello", "World")


class ProcessorFactory:
    """
    Builds processors by mode.

    The factory holds no per-request state: every call returns a new
    processor owned by the caller.
    """

    def __init__(self, console: Console | None = None):
        self._console = console
        self._builders: dict[ProcessorKind, Callable[[CompressionParams], FileProcessor]] = {
            ProcessorKind.IDENTITY: lambda _: IdentityProcessor(console=self._console),
            ProcessorKind.ENCODE: lambda _: FileEncoder(console=self._console),
            ProcessorKind.COMPRESS: lambda params: FileCompressor.from_params(
                params, console=self._console
            ),
            ProcessorKind.ENCRYPT: lambda _: FileEncryptor(console=self._console),
        }

    def supported_modes(self) -> list[str]:
        """Get the mode names this factory recognizes."""
        return [kind.value for kind in self._builders]

    def resolve_kind(self, mode: str | ProcessorKind) -> ProcessorKind:
        """
        Map a mode name to its processor kind.

        Raises:
            UnsupportedModeError: If the mode is not recognized
        """
        if isinstance(mode, ProcessorKind):
            return mode
        try:
            return ProcessorKind(mode)
        except ValueError:
            raise UnsupportedModeError(str(mode), self.supported_modes()) from None

    def create_processor(
        self,
        mode: str | ProcessorKind,
        compression: CompressionParams | None = None,
    ) -> FileProcessor:
        """
        Create a new processor for the given mode.

        Args:
            mode: Mode name (identity, encode, compress, encrypt)
            compression: Parameters for the compressor, defaults to Hello/World

        Returns:
            A processor owned by the caller

        Raises:
            UnsupportedModeError: If the mode is not recognized
            AllocationFailureError: If the processor cannot allocate its resources
        """
        kind = self.resolve_kind(mode)
        processor = self._builders[kind](compression or DEFAULT_COMPRESSION_PARAMS)
        logger.debug(f"Created {type(processor).__name__} for mode {kind.value!r}")
        return processor


_factory: ProcessorFactory | None = None
_factory_lock = threading.Lock()


def get_processor_factory() -> ProcessorFactory:
    """Get the process-wide processor factory, creating it on first use."""
    global _factory
    if _factory is None:
        with _factory_lock:
            if _factory is None:
                _factory = ProcessorFactory()
    return _factory
