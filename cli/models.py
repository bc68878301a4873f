"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SplitCommand:
    """Split a file into parts."""

    source_path: str
    base_path: str
    chunk_size_mb: int | None = None
    command: Literal["split"] = "split"


@dataclass(frozen=True)
class JoinCommand:
    """Join parts back into the original file."""

    manifest_path: str
    output_path: str | None = None
    command: Literal["join"] = "join"


@dataclass(frozen=True)
class VerifyCommand:
    """Verify parts against their manifest."""

    manifest_path: str
    command: Literal["verify"] = "verify"


@dataclass(frozen=True)
class ShellCommand:
    """Start the interactive shell."""

    command: Literal["shell"] = "shell"


CommandRequest = SplitCommand | JoinCommand | VerifyCommand | ShellCommand
