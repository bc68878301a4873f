"""Split/join engine: chunk files, splitting and verified rejoining."""

from engine.joiner import join_file, process_manifest, verify_file
from engine.splitter import split_file

__all__ = [
    "split_file",
    "join_file",
    "verify_file",
    "process_manifest",
]
