"""Compression processor and its parameters."""

from dataclasses import dataclass

from rich.console import Console

from ..utils.logging import get_logger
from .base import FileReadingProcessor, ProcessorKind

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompressionParams:
    """The two configuration strings a compressor is built with."""

    first: str
    second: str

    def describe(self) -> str:
        return f"{self.first} {self.second}"


class FileCompressor(FileReadingProcessor):
    """
    Describes compressing the first token of each file.

    The parameters belong to exactly one compressor at a time. ``transfer``
    hands them to a new instance and leaves this one parameter-empty.
    """

    kind = ProcessorKind.COMPRESS

    def __init__(self, first: str, second: str, console: Console | None = None):
        super().__init__(console=console)
        self._params: CompressionParams | None = CompressionParams(first, second)

    @classmethod
    def from_params(cls, params: CompressionParams, console: Console | None = None) -> "FileCompressor":
        return cls(params.first, params.second, console=console)

    @property
    def params(self) -> CompressionParams | None:
        """Current parameters, or None once they have been transferred away."""
        return self._params

    def transfer(self) -> "FileCompressor":
        """
        Move the parameters into a new compressor.

        Returns:
            A compressor owning this instance's parameters. This instance is
            left with no parameters.
        """
        moved = FileCompressor("", "", console=self._console)
        moved._params, self._params = self._params, None
        logger.debug("Transferred compression parameters to a new compressor")
        return moved

    def _transform(self, content: str) -> None:
        self.compress_file(content)

    def compress_file(self, content: str) -> None:
        if self._params is None:
            self.emit(f"compressing file with content: {content} using no params")
        else:
            self.emit(
                f"compressing file with content: {content} using params {self._params.describe()}"
            )
