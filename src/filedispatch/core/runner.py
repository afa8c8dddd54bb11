"""Batch runner driving one processor over a list of paths."""

from dataclasses import dataclass, field
from pathlib import Path

from ..processors import (
    CompressionParams,
    ErrorKind,
    ProcessingError,
    ProcessorFactory,
    get_processor_factory,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class FileResult:
    """Result of processing a single path."""

    file_path: Path
    success: bool
    error_kind: ErrorKind | None = None
    error_message: str | None = None


@dataclass
class BatchResult:
    """Result of a whole run."""

    mode: str
    files: list[FileResult] = field(default_factory=list)
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.error_kind is None and all(f.success for f in self.files)

    @property
    def failures(self) -> list[FileResult]:
        return [f for f in self.files if not f.success]

    @property
    def first_error(self) -> str | None:
        """The message of the first failure, batch-level or per-file."""
        if self.error_message:
            return self.error_message
        failures = self.failures
        return failures[0].error_message if failures else None


class BatchRunner:
    """
    Runs one processor over a list of paths, in order.

    With ``fail_fast`` (the default) the first failing path stops the run and
    later paths are not attempted. Otherwise every path is attempted and the
    run fails if any of them did.
    """

    def __init__(
        self,
        factory: ProcessorFactory | None = None,
        fail_fast: bool = True,
        compression: CompressionParams | None = None,
    ):
        self.factory = factory or get_processor_factory()
        self.fail_fast = fail_fast
        self.compression = compression

    def run(self, mode: str, file_paths: list[str | Path]) -> BatchResult:
        """
        Process every path with a processor built for ``mode``.

        Args:
            mode: Mode name passed to the factory
            file_paths: Paths to process, in order

        Returns:
            BatchResult describing the run

        Raises:
            Exception: Anything other than a ProcessingError is an internal
                fault and propagates after the processor has been released
        """
        result = BatchResult(mode=getattr(mode, "value", str(mode)))

        try:
            processor = self.factory.create_processor(mode, compression=self.compression)
        except ProcessingError as e:
            logger.info(e.message)
            result.error_kind = e.kind
            result.error_message = e.message
            return result

        with processor:
            for file_path in file_paths:
                file_result = self._process_one(processor, Path(file_path))
                result.files.append(file_result)
                if not file_result.success and self.fail_fast:
                    logger.info("Stopping after first failure")
                    break

        logger.info(
            f"Processed {len(result.files)}/{len(file_paths)} files in mode {result.mode!r}, "
            f"{len(result.failures)} failed"
        )
        return result

    def _process_one(self, processor, file_path: Path) -> FileResult:
        try:
            processor.process(file_path)
        except ProcessingError as e:
            logger.info(f"Failed to process {file_path}: {e.message}")
            return FileResult(
                file_path=file_path,
                success=False,
                error_kind=e.kind,
                error_message=e.message,
            )
        return FileResult(file_path=file_path, success=True)
