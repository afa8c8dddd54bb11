"""Command-line entry point for filedispatch using Click."""

import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import get_config_manager
from ..core import BatchRunner
from ..processors import CompressionParams
from ..utils.logging import get_logger, print_error, setup_logging

logger = get_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="filedispatch")
@click.argument("mode")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.option(
    "--continue-on-error",
    is_flag=True,
    default=False,
    help="Attempt every path instead of stopping at the first failure",
)
def main(
    mode: str,
    paths: tuple[Path, ...],
    config: Optional[Path],
    log_level: Optional[str],
    continue_on_error: bool,
):
    """
    Apply a file processor to every PATH, in order.

    MODE selects the processor: identity, encode, compress or encrypt.
    Exits with status 0 when every path was processed and 1 otherwise.
    """
    try:
        dispatch_config = get_config_manager(config).load(create_if_missing=True)
    except (FileNotFoundError, ValueError) as e:
        print_error(str(e))
        sys.exit(1)

    setup_logging(
        level=log_level or dispatch_config.logging.level,
        log_dir=dispatch_config.logging.log_dir,
        max_bytes=dispatch_config.logging.max_bytes,
        backup_count=dispatch_config.logging.backup_count,
        console_enabled=dispatch_config.logging.console_enabled,
        file_enabled=dispatch_config.logging.file_enabled,
    )

    runner = BatchRunner(
        fail_fast=dispatch_config.batch.fail_fast and not continue_on_error,
        compression=CompressionParams(
            dispatch_config.compression.first, dispatch_config.compression.second
        ),
    )

    try:
        result = runner.run(mode, list(paths))
    except Exception as e:
        logger.exception("Internal error while processing files")
        print_error(f"Internal error: {e}")
        sys.exit(1)

    if not result.success:
        failures = result.failures
        if len(failures) > 1:
            print_error(f"{len(failures)} files failed, first: {result.first_error}")
        else:
            print_error(result.first_error or "Processing failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
