"""Encoding processor."""

from .base import FileReadingProcessor, ProcessorKind


class FileEncoder(FileReadingProcessor):
    """Describes encoding the first token of each file."""

    kind = ProcessorKind.ENCODE

    def _transform(self, content: str) -> None:
        self.encode_file(content)

    def encode_file(self, content: str) -> None:
        self.emit(f"encoding file with content: {content}")
