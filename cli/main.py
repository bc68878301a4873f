"""CLI entry point."""

import sys
from typing import Optional

from common.exceptions import SplitJoinError
from common.logging_config import setup_logging
from cli.commands import get_config
from cli.constants import USAGE_TEXT
from cli.models import ShellCommand
from cli.parser import ParseError, parse_args
from cli.repl import dispatch_command, repl_loop


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for CLI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Process exit code: 0 on success or usage, 1 on any split/join failure
    """
    args = list(sys.argv[1:] if argv is None else argv)
    debug = '--debug' in args
    if debug:
        args = [arg for arg in args if arg != '--debug']

    config = get_config()
    log_level = 'DEBUG' if debug else config.get_log_level()
    logger = setup_logging('cli', log_level=log_level)

    if debug:
        logger.debug("Debug logging enabled")

    try:
        cmd_obj = parse_args(args)
    except ParseError as e:
        if args:
            print(f"Error: {e}", file=sys.stderr)
        print(USAGE_TEXT, file=sys.stderr)
        return 0
    except SplitJoinError as e:
        logger.error(f"Invalid arguments: {e}")
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    if isinstance(cmd_obj, ShellCommand):
        repl_loop(config)
        return 0

    try:
        print(dispatch_command(cmd_obj, config=config))
    except SplitJoinError as e:
        logger.error(f"{cmd_obj.command} failed: {e}")
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
