"""Command handler functions for CLI operations."""

from typing import Callable, Optional

from common.logging_config import get_logger
from common.types import ChunkRecord, JoinResult
from cli.config import Config
from cli.models import JoinCommand, SplitCommand, VerifyCommand
from cli.utils import format_file_size
from engine import join_file, split_file, verify_file
from engine.chunk_storage import base_file_name

logger = get_logger(__name__)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        logger.debug("Loading CLI configuration")
        _config = Config()
    return _config


Echo = Callable[[str], None]


def handle_split(cmd: SplitCommand, config: Optional[Config] = None, echo: Echo = print) -> str:
    """
    Handle 'split' command.

    Progress lines go through echo as each part is written.

    Args:
        cmd: SplitCommand with source, base path and optional size
        config: Optional Config for dependency injection (testing)
        echo: Receives each progress line

    Returns:
        Summary line for the finished split

    Raises:
        SplitJoinError: If the split fails
    """
    chunk_size_mb = cmd.chunk_size_mb
    if chunk_size_mb is None:
        if config is None:
            config = get_config()
        chunk_size_mb = config.get_default_chunk_size_mb()

    def on_start(manifest_path: str) -> None:
        echo(f"Split file is '{manifest_path}'")
        echo(f"Splitting file {base_file_name(cmd.base_path)} into chunks of {chunk_size_mb}MB...")

    def on_chunk(record: ChunkRecord, chunk_path: str) -> None:
        echo(f"  Part {record.index}: {chunk_path} written")

    logger.info(f"Executing split command: source={cmd.source_path} base={cmd.base_path} size={chunk_size_mb}MB")
    result = split_file(
        cmd.source_path,
        cmd.base_path,
        chunk_size_mb,
        on_start=on_start,
        on_chunk=on_chunk,
    )

    return (
        f"File split successfully: {result.manifest.chunk_count} part(s), "
        f"{format_file_size(result.total_size)}"
    )


def _progress_callbacks(write_output: bool, echo: Echo):
    action = "Joining" if write_output else "Verifying"
    status = "written" if write_output else "verified"

    def on_start(output_path: str) -> None:
        echo(f"{action} file '{output_path}'...")

    def on_record(record: ChunkRecord, chunk_path: str) -> None:
        echo(f"  Reading file '{record.filename}'... {status}")

    return on_start, on_record


def _format_summary(result: JoinResult) -> str:
    if result.wrote_output:
        return f"File re-created successfully ({format_file_size(result.total_size)})"
    return f"File verified successfully ({result.manifest.chunk_count} part(s))"


def handle_join(cmd: JoinCommand, echo: Echo = print) -> str:
    """
    Handle 'join' command.

    Args:
        cmd: JoinCommand with manifest path and optional output path
        echo: Receives each progress line as its part is written

    Returns:
        Summary line for the re-created file

    Raises:
        SplitJoinError: If the join fails
    """
    logger.info(f"Executing join command: manifest={cmd.manifest_path} output={cmd.output_path}")
    on_start, on_record = _progress_callbacks(True, echo)
    result = join_file(cmd.manifest_path, cmd.output_path, on_start=on_start, on_record=on_record)
    return _format_summary(result)


def handle_verify(cmd: VerifyCommand, echo: Echo = print) -> str:
    """
    Handle 'verify' command.

    Args:
        cmd: VerifyCommand with manifest path
        echo: Receives each progress line as its part is verified

    Returns:
        Summary line for the verified manifest

    Raises:
        SplitJoinError: If verification fails
    """
    logger.info(f"Executing verify command: manifest={cmd.manifest_path}")
    on_start, on_record = _progress_callbacks(False, echo)
    result = verify_file(cmd.manifest_path, on_start=on_start, on_record=on_record)
    return _format_summary(result)
