"""Verifies chunk files against a .split manifest and rejoins them."""

from contextlib import ExitStack
from typing import List, Optional

from common.digest import compute_digest, verify_digest
from common.exceptions import IntegrityError, SplitIOError
from common.logging_config import get_logger
from common.manifest import iter_records, read_header
from common.types import ChunkCallback, ChunkRecord, JoinResult, SplitManifest, StartCallback
from engine.chunk_storage import (
    created_file,
    manifest_directory,
    read_chunk,
    resolve_in_directory,
    write_all,
)

logger = get_logger(__name__)


def process_manifest(
    manifest_path: str,
    output_path: Optional[str] = None,
    write_output: bool = True,
    on_start: Optional[StartCallback] = None,
    on_record: Optional[ChunkCallback] = None,
) -> JoinResult:
    """
    Check every chunk listed in a manifest and optionally rebuild the original file.

    Chunks are processed strictly in manifest order and the first problem
    stops the run. When writing, an existing output file is never touched
    and a partially written output is removed on failure.

    Args:
        manifest_path: Path to the ``.split`` manifest
        output_path: Output file; defaults to the original name next to the manifest
        write_output: Rebuild the file (join) or only check digests (verify)
        on_start: Called with the output path before the first chunk is read
        on_record: Called with each record and its chunk path once it has
            been written or verified

    Returns:
        JoinResult with every processed record

    Raises:
        SplitIOError: If a file cannot be opened, loaded or written, or the output exists
        FormatError: If the manifest is malformed
        IntegrityError: If a chunk's digest does not match the manifest
    """
    try:
        manifest = open(manifest_path, 'r', encoding='utf-8', errors='surrogateescape')
    except OSError as e:
        raise SplitIOError(f"unable to open file '{manifest_path}': {e.strerror or e}") from e

    directory = manifest_directory(manifest_path)
    records: List[ChunkRecord] = []
    total_size = 0

    with manifest:
        lines = iter(manifest)
        original_name, chunk_size = read_header(lines)
        if output_path is None:
            output_path = resolve_in_directory(directory, original_name)

        with ExitStack() as stack:
            out = None
            if write_output:
                out = stack.enter_context(created_file(output_path, exclusive=True))

            logger.info(f"{'Joining' if write_output else 'Verifying'} file '{output_path}'")
            if on_start is not None:
                on_start(output_path)

            for record in iter_records(lines):
                chunk_path = resolve_in_directory(directory, record.filename)
                logger.debug(f"Reading file '{chunk_path}'")
                data = read_chunk(chunk_path)

                if not verify_digest(data, record.digest):
                    computed = compute_digest(data)
                    logger.error(f"Digest mismatch for '{chunk_path}': expected {record.digest}, computed {computed}")
                    raise IntegrityError(chunk_path, record.digest, computed)

                if out is not None:
                    write_all(out, data)
                    logger.info(f"Part {record.index} written from '{chunk_path}'")
                else:
                    logger.info(f"Part {record.index} verified: '{chunk_path}'")

                records.append(record)
                total_size += len(data)
                if on_record is not None:
                    on_record(record, chunk_path)

    logger.info(
        f"File {'re-created' if write_output else 'verified'} successfully "
        f"({len(records)} parts, {total_size} bytes)"
    )
    return JoinResult(
        manifest_path=manifest_path,
        output_path=output_path,
        manifest=SplitManifest(
            original_name=original_name,
            chunk_size=chunk_size,
            records=tuple(records),
        ),
        wrote_output=write_output,
        total_size=total_size,
    )


def join_file(
    manifest_path: str,
    output_path: Optional[str] = None,
    *,
    on_start: Optional[StartCallback] = None,
    on_record: Optional[ChunkCallback] = None,
) -> JoinResult:
    """Rebuild the original file from its chunks."""
    return process_manifest(manifest_path, output_path, True, on_start, on_record)


def verify_file(
    manifest_path: str,
    *,
    on_start: Optional[StartCallback] = None,
    on_record: Optional[ChunkCallback] = None,
) -> JoinResult:
    """Check every chunk against the manifest without writing anything."""
    return process_manifest(manifest_path, None, False, on_start, on_record)
