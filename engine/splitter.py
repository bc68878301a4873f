"""Splits a source file into fixed-size chunk files plus a .split manifest."""

import os
from typing import List, Optional

from common.constants import BYTES_PER_MB, DEFAULT_SPLIT_SIZE_MB, MAX_PARTS, MAX_SPLIT_SIZE_MB
from common.digest import compute_digest
from common.exceptions import ConfigError, SplitIOError
from common.logging_config import get_logger
from common.manifest import write_header, write_record
from common.types import ChunkCallback, ChunkRecord, SplitManifest, SplitResult, StartCallback
from engine.chunk_storage import (
    base_file_name,
    chunk_suffix,
    created_file,
    get_chunk_path,
    manifest_path_for,
    read_exact,
    write_all,
)

logger = get_logger(__name__)


def count_parts(total_length: int, chunk_size: int) -> int:
    """Number of chunks needed to hold total_length bytes."""
    return (total_length + chunk_size - 1) // chunk_size


def _allocate_buffer(chunk_size: int) -> bytearray:
    try:
        return bytearray(chunk_size)
    except MemoryError as e:
        raise SplitIOError("unable to allocate memory for the split") from e


def split_file(
    source_path: str,
    base_path: str,
    chunk_size_mb: int = DEFAULT_SPLIT_SIZE_MB,
    *,
    unit_bytes: int = BYTES_PER_MB,
    on_start: Optional[StartCallback] = None,
    on_chunk: Optional[ChunkCallback] = None,
) -> SplitResult:
    """
    Split a file into chunk files and write a manifest describing them.

    Produces ``<base_path>.split`` and ``<base_path>.000`` onwards. If a chunk
    cannot be written, the manifest and that chunk are removed; chunks that
    were completed before the failure are left in place.

    Args:
        source_path: File to split
        base_path: Path prefix for the manifest and chunk files
        chunk_size_mb: Chunk size in size units (at most 500)
        unit_bytes: Unit override for chunk_size_mb; one MiB unless the
            caller wants byte-sized chunks
        on_start: Called with the manifest path once the header is written
        on_chunk: Called with each record and its chunk path once written

    Returns:
        SplitResult describing the manifest and chunk files

    Raises:
        ConfigError: If the chunk size or the resulting part count is out of range
        SplitIOError: If a file cannot be opened, created or written
    """
    if chunk_size_mb > MAX_SPLIT_SIZE_MB:
        raise ConfigError(f"maximum split size is {MAX_SPLIT_SIZE_MB}MB (even that is way huge!)")
    if chunk_size_mb <= 0:
        raise ConfigError(f"split size must be positive, got {chunk_size_mb}")
    chunk_size = chunk_size_mb * unit_bytes

    try:
        source = open(source_path, 'rb')
    except OSError as e:
        raise SplitIOError(f"unable to open file '{source_path}': {e.strerror or e}") from e

    with source:
        total_length = os.fstat(source.fileno()).st_size
        if total_length < chunk_size:
            raise ConfigError("file is smaller than the split size")
        if count_parts(total_length, chunk_size) > MAX_PARTS:
            raise ConfigError(f"too many splits (maximum is {MAX_PARTS})")

        buffer = _allocate_buffer(chunk_size)

        name = base_file_name(base_path)
        manifest_path = manifest_path_for(base_path)
        records: List[ChunkRecord] = []
        chunk_paths: List[str] = []

        with created_file(manifest_path, text=True) as manifest:
            write_header(manifest, name, chunk_size)
            logger.info(f"Split file is '{manifest_path}'")
            logger.info(f"Splitting file {name} into chunks of {chunk_size} bytes")
            if on_start is not None:
                on_start(manifest_path)

            for index in range(MAX_PARTS):
                length = read_exact(source, buffer)
                if length == 0:
                    break

                data = memoryview(buffer)[:length]
                record = ChunkRecord(
                    index=index,
                    digest=compute_digest(data),
                    filename=name + chunk_suffix(index),
                )
                write_record(manifest, record)

                chunk_path = get_chunk_path(base_path, index)
                logger.debug(f"Writing part {index} ({length} bytes) to '{chunk_path}'")
                with created_file(chunk_path) as out:
                    write_all(out, data)

                records.append(record)
                chunk_paths.append(chunk_path)
                logger.info(f"Part {index} written: {chunk_path}")
                if on_chunk is not None:
                    on_chunk(record, chunk_path)

                if length < chunk_size:
                    break

    logger.info(f"File split successfully into {len(records)} parts")
    return SplitResult(
        manifest_path=manifest_path,
        manifest=SplitManifest(
            original_name=name,
            chunk_size=chunk_size,
            records=tuple(records),
        ),
        chunk_paths=tuple(chunk_paths),
        total_size=total_length,
    )
