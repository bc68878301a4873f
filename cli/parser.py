"""Command parser for CLI input."""

import shlex

from common.exceptions import ConfigError
from cli.models import (
    CommandRequest,
    JoinCommand,
    ShellCommand,
    SplitCommand,
    VerifyCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def normalize_command_name(name: str) -> str:
    """Lower-case a command name and drop the dash form (-split -> split)."""
    return name.lower().lstrip("-")


def parse_command(input_line: str) -> CommandRequest:
    """Parse a line of user input into a CommandRequest object.

    Args:
        input_line: Raw user input from the shell

    Returns:
        CommandRequest object (one of Split/Join/Verify/Shell)

    Raises:
        ParseError: If command syntax is invalid
        ConfigError: If the split size is not a whole number
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    return parse_args(tokens)


def parse_args(tokens: list[str]) -> CommandRequest:
    """Parse already tokenized arguments (e.g. sys.argv[1:]).

    Raises:
        ParseError: If no command is given, it is unknown, or has the wrong arity
        ConfigError: If the split size is not a whole number
    """
    if not tokens:
        raise ParseError("Empty command")

    command_name = normalize_command_name(tokens[0])

    if command_name == "split":
        return _parse_split(tokens[1:])
    elif command_name == "join":
        return _parse_join(tokens[1:])
    elif command_name == "verify":
        return _parse_verify(tokens[1:])
    elif command_name == "shell":
        return _parse_shell(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {tokens[0]}")


def _parse_split(args: list[str]) -> SplitCommand:
    """Parse 'split <bigfile> <basename> [<size>]' command.

    A size that is not a whole number raises ConfigError, not ParseError.
    """
    if len(args) not in (2, 3):
        raise ParseError("split requires 2 or 3 arguments: <bigfile> <basename> [<size>]")

    chunk_size_mb = None
    if len(args) == 3:
        try:
            chunk_size_mb = int(args[2])
        except ValueError:
            raise ConfigError(f"split size must be a whole number of MB, got '{args[2]}'")

    return SplitCommand(source_path=args[0], base_path=args[1], chunk_size_mb=chunk_size_mb)


def _parse_join(args: list[str]) -> JoinCommand:
    """Parse 'join <splitfile> [<outputfile>]' command."""
    if len(args) not in (1, 2):
        raise ParseError("join requires 1 or 2 arguments: <splitfile> [<outputfile>]")

    output_path = args[1] if len(args) > 1 else None
    return JoinCommand(manifest_path=args[0], output_path=output_path)


def _parse_verify(args: list[str]) -> VerifyCommand:
    """Parse 'verify <splitfile>' command."""
    if len(args) != 1:
        raise ParseError("verify requires exactly 1 argument: <splitfile>")

    return VerifyCommand(manifest_path=args[0])


def _parse_shell(args: list[str]) -> ShellCommand:
    if args:
        raise ParseError("shell takes no arguments")
    return ShellCommand()
