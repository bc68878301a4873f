"""Reads and writes the line-oriented .split manifest format.

A manifest looks like::

    splitfile=<original base file name>
    splitsize=<chunk size in bytes>
    hash=<40 hex digest> file=<chunk file name>
    ...

with one ``hash=... file=...`` line per chunk, in reconstruction order.
"""

import os
import re
from typing import IO, Iterable, Iterator, List, Optional, Tuple

from common.constants import DIGEST_HEX_LENGTH
from common.exceptions import FormatError
from common.types import ChunkRecord, SplitManifest

NAME_PREFIX = "splitfile="
SIZE_PREFIX = "splitsize="

SIZE_PATTERN = re.compile(r"^splitsize=(\d+)$")
RECORD_PATTERN = re.compile(
    r"^hash=(?P<digest>[0-9A-Fa-f]{%d}) file=(?P<filename>.+)$" % DIGEST_HEX_LENGTH
)

# Header occupies lines 1 and 2; records start on line 3.
FIRST_RECORD_LINE = 3

# Names that would resolve outside the manifest's directory.
RESERVED_NAMES = (".", "..")


def _clean(line: Optional[str]) -> Optional[str]:
    if line is None:
        return None
    return line.rstrip()


def is_plain_name(name: str) -> bool:
    """True if name is a bare file name with no directory part."""
    if not name or name in RESERVED_NAMES or os.path.isabs(name):
        return False
    separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
    return not any(sep in name for sep in separators)


def format_header(original_name: str, chunk_size: int) -> List[str]:
    """Return the two header lines (without newlines)."""
    return [f"{NAME_PREFIX}{original_name}", f"{SIZE_PREFIX}{chunk_size}"]


def format_record(record: ChunkRecord) -> str:
    """Return the record line for a chunk (without newline)."""
    return f"hash={record.digest} file={record.filename}"


def write_header(handle: IO[str], original_name: str, chunk_size: int) -> None:
    for line in format_header(original_name, chunk_size):
        handle.write(line + "\n")


def write_record(handle: IO[str], record: ChunkRecord) -> None:
    handle.write(format_record(record) + "\n")


def parse_name_line(line: Optional[str]) -> str:
    """
    Parse the ``splitfile=<name>`` header line.

    Args:
        line: Raw first line of the manifest, or None if the file is empty

    Returns:
        The original base file name

    Raises:
        FormatError: If the line is missing, malformed or names a path
    """
    cleaned = _clean(line)
    if cleaned is None or not cleaned.startswith(NAME_PREFIX):
        raise FormatError(1, cleaned or "")
    name = cleaned[len(NAME_PREFIX):].strip()
    if not is_plain_name(name):
        raise FormatError(1, cleaned)
    return name


def parse_size_line(line: Optional[str]) -> int:
    """
    Parse the ``splitsize=<integer>`` header line.

    Raises:
        FormatError: If the line is missing or malformed
    """
    cleaned = _clean(line)
    match = SIZE_PATTERN.match(cleaned or "")
    if match is None:
        raise FormatError(2, cleaned or "")
    return int(match.group(1))


def parse_record_line(line: str, index: int) -> ChunkRecord:
    """
    Parse one ``hash=<digest> file=<name>`` record line.

    Args:
        line: Raw manifest line
        index: Zero-based position of the record among all records

    Raises:
        FormatError: If the line does not match the record layout or the
            file name has a directory part
    """
    cleaned = _clean(line)
    match = RECORD_PATTERN.match(cleaned)
    filename = match.group("filename").strip() if match else ""
    if not is_plain_name(filename):
        raise FormatError(index + FIRST_RECORD_LINE, cleaned)
    return ChunkRecord(
        index=index,
        digest=match.group("digest"),
        filename=filename,
    )


def read_header(lines: Iterator[str]) -> Tuple[str, int]:
    """Consume and parse the two header lines from a line iterator."""
    original_name = parse_name_line(next(lines, None))
    chunk_size = parse_size_line(next(lines, None))
    return original_name, chunk_size


def iter_records(lines: Iterable[str]) -> Iterator[ChunkRecord]:
    """
    Lazily parse record lines.

    A malformed line raises FormatError only when it is reached, so every
    record before it has already been yielded.
    """
    for index, line in enumerate(lines):
        yield parse_record_line(line, index)


def encode_manifest(manifest: SplitManifest) -> str:
    lines = format_header(manifest.original_name, manifest.chunk_size)
    lines.extend(format_record(record) for record in manifest.records)
    return "".join(line + "\n" for line in lines)


def decode_manifest(text: str) -> SplitManifest:
    """
    Parse a complete manifest held in memory.

    Raises:
        FormatError: On the first malformed line
    """
    lines = iter(text.splitlines())
    original_name, chunk_size = read_header(lines)
    return SplitManifest(
        original_name=original_name,
        chunk_size=chunk_size,
        records=tuple(iter_records(lines)),
    )
