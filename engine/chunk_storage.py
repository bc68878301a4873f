"""Manages chunk and manifest files on disk: naming, read/write and cleanup."""

import os
from contextlib import contextmanager
from typing import IO, Iterator

from common.constants import CHUNK_INDEX_WIDTH, MANIFEST_SUFFIX
from common.exceptions import SplitIOError
from common.logging_config import get_logger

logger = get_logger(__name__)


def base_file_name(base_path: str) -> str:
    """
    Get the last path component of a base path.

    Args:
        base_path: Path prefix shared by the manifest and the chunks

    Returns:
        Text after the final path separator, or the whole string if none
    """
    return os.path.basename(base_path)


def manifest_path_for(base_path: str) -> str:
    return f"{base_path}{MANIFEST_SUFFIX}"


def chunk_suffix(index: int) -> str:
    return f".{index:0{CHUNK_INDEX_WIDTH}d}"


def get_chunk_path(base_path: str, index: int) -> str:
    """
    Get file path for a chunk.

    Args:
        base_path: Path prefix of the split
        index: Zero-based chunk index (0-999)

    Returns:
        Path string such as ``<base_path>.007``
    """
    return f"{base_path}{chunk_suffix(index)}"


def manifest_directory(manifest_path: str) -> str:
    """Directory that chunk names and the default output are relative to."""
    return os.path.dirname(manifest_path)


def resolve_in_directory(directory: str, name: str) -> str:
    return os.path.join(directory, name) if directory else name


def discard_file(path: str) -> bool:
    """
    Best-effort removal of a file created by the current step.

    Args:
        path: File to remove

    Returns:
        True if the file was removed, False if it was missing or could not be removed
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning(f"Could not remove '{path}': {e}")
        return False
    logger.debug(f"Removed '{path}'")
    return True


@contextmanager
def created_file(path: str, text: bool = False, exclusive: bool = False) -> Iterator[IO]:
    """
    Create a file and remove it again if the block raises.

    Args:
        path: File to create (truncated if it exists, unless exclusive)
        text: Open in text mode with ``\\n`` newlines instead of binary
        exclusive: Fail instead of replacing an existing file

    Yields:
        The open file handle; it is closed when the block exits

    Raises:
        SplitIOError: If the file cannot be created or a write/close fails
    """
    mode = ('x' if exclusive else 'w') + ('' if text else 'b')
    try:
        if text:
            handle = open(path, mode, encoding='utf-8', errors='surrogateescape', newline='\n')
        else:
            handle = open(path, mode)
    except FileExistsError as e:
        raise SplitIOError(f"output file '{path}' already exists") from e
    except OSError as e:
        raise SplitIOError(f"unable to create file '{path}': {e.strerror or e}") from e

    try:
        with handle:
            yield handle
    except OSError as e:
        discard_file(path)
        raise SplitIOError(f"error writing file '{path}' (out of space?): {e.strerror or e}") from e
    except BaseException:
        discard_file(path)
        raise


def write_all(handle: IO[bytes], data) -> None:
    """
    Write a buffer completely.

    Raises:
        SplitIOError: If fewer bytes than requested were written
    """
    expected = len(data)
    written = handle.write(data)
    if written is not None and written != expected:
        raise SplitIOError(
            f"error writing file '{handle.name}' (out of space?): "
            f"wrote {written} of {expected} bytes"
        )


def read_exact(handle: IO[bytes], buffer: bytearray) -> int:
    """
    Fill a buffer from a binary stream, stopping early only at end of file.

    Args:
        handle: Binary file opened for reading
        buffer: Pre-allocated buffer to fill

    Returns:
        Number of bytes read (less than len(buffer) only at end of file)

    Raises:
        SplitIOError: If the underlying read fails
    """
    view = memoryview(buffer)
    filled = 0
    while filled < len(buffer):
        try:
            count = handle.readinto(view[filled:])
        except OSError as e:
            raise SplitIOError(f"error reading file '{handle.name}': {e.strerror or e}") from e
        if not count:
            break
        filled += count
    return filled


def read_chunk(path: str) -> bytes:
    """
    Read an entire chunk from disk.

    Args:
        path: Chunk file path

    Returns:
        Raw chunk data

    Raises:
        SplitIOError: If the chunk cannot be loaded
    """
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise SplitIOError(f"unable to load file '{path}': {e.strerror or e}") from e
    except MemoryError as e:
        raise SplitIOError(f"unable to allocate memory for file '{path}'") from e
