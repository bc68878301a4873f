"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

# Commands that make sense inside the interactive shell.
SHELL_COMMANDS = ["split", "join", "verify", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#F45935 bold",
        "command": "#0088ff bold",
    }
)

WELCOME_TITLE = "splitjoin - split files into verified chunks and join them back"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "splitjoin> "

USAGE_TEXT = """Usage:
  splitjoin split <bigfile> <basename> [<size>] -- split file into parts
  splitjoin join <splitfile> [<outputfile>] -- join file parts into original file
  splitjoin verify <splitfile> -- verify a split file
  splitjoin shell -- start an interactive session

Where:
  <bigfile> is the large file you wish to split
  <basename> is the base path and name to assign to the split files
  <size> is the optional split size, in MB (100MB is the default)
  <splitfile> is the name of the <basename>.split generated with split
  <outputfile> is the name of the file to output (defaults to original name)

Add --debug to any command for detailed logging."""

HELP_TEXT = """Available commands:
  split <bigfile> <basename> [<size>]   Split file into parts of <size> MB
  join <splitfile> [<outputfile>]       Join parts back into the original file
  verify <splitfile>                    Check every part against the manifest
  clear                                 Clear screen and redisplay welcome message
  help                                  Show this help
  exit                                  Exit the shell

Examples:
  split backups/disk.img out/disk 200
  verify out/disk.split
  join out/disk.split restored/disk.img"""

MANIFEST_EXTENSION = ".split"
