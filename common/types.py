"""Shared data type definitions (ChunkRecord, SplitManifest, results)."""

from dataclasses import dataclass
from typing import Callable, Tuple


@dataclass(frozen=True)
class ChunkRecord:
    """
    One manifest entry: the digest and file name of a single chunk.
    """
    index: int
    digest: str
    filename: str


@dataclass(frozen=True)
class SplitManifest:
    """
    Contents of a .split manifest file.
    """
    original_name: str
    chunk_size: int
    records: Tuple[ChunkRecord, ...] = ()

    @property
    def chunk_count(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class SplitResult:
    """
    Outcome of a successful split.
    """
    manifest_path: str
    manifest: SplitManifest
    chunk_paths: Tuple[str, ...]
    total_size: int


@dataclass(frozen=True)
class JoinResult:
    """
    Outcome of a successful join or verify.
    """
    manifest_path: str
    output_path: str
    manifest: SplitManifest
    wrote_output: bool
    total_size: int


# Progress hooks: StartCallback receives the manifest (split) or output
# (join/verify) path; ChunkCallback fires once a chunk is fully handled.
StartCallback = Callable[[str], None]
ChunkCallback = Callable[[ChunkRecord, str], None]
