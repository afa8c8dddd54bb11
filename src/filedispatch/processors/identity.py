"""Identity processor."""

from pathlib import Path

from .base import FileProcessor, ProcessorKind


class IdentityProcessor(FileProcessor):
    """Leaves files untouched. Never opens the path and never fails."""

    kind = ProcessorKind.IDENTITY

    def process(self, file_path: str | Path) -> None:
        pass
