"""Custom completer for the splitjoin shell with file path autocompletion."""

from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import MANIFEST_EXTENSION, SHELL_COMMANDS

# Argument positions (1-based) that take a path, per command.
# True means only .split manifests are offered.
PATH_ARGUMENTS = {
    "split": {1: False, 2: False},
    "join": {1: True, 2: False},
    "verify": {1: True},
}


class SplitJoinCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - File path completion for split/join/verify arguments, limited to
      .split manifests where a manifest is expected
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower().lstrip("-")
        position = len(tokens) if is_typing_new_token else len(tokens) - 1
        arguments = PATH_ARGUMENTS.get(command, {})
        if position not in arguments:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_paths(current_word, manifests_only=arguments[position])

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in SHELL_COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_paths(self, partial: str, manifests_only: bool) -> Iterable[Completion]:
        """
        Complete file paths relative to the current directory.

        Directories are always offered (with a trailing slash) so the user
        can descend into them. Shows a message if no manifest is available.
        """
        directory_part, sep, name_part = partial.rpartition("/")
        prefix = directory_part + sep
        if sep:
            base = Path(prefix) if Path(prefix).is_absolute() else Path.cwd() / prefix
        else:
            base = Path.cwd()

        if not base.is_dir():
            return

        found = False
        for item in sorted(base.iterdir(), key=lambda p: p.name):
            if not item.name.startswith(name_part):
                continue
            if item.name.startswith(".") and not name_part.startswith("."):
                continue
            if item.is_dir():
                candidate = f"{prefix}{item.name}/"
            elif manifests_only and not item.name.lower().endswith(MANIFEST_EXTENSION):
                continue
            else:
                candidate = f"{prefix}{item.name}"
                found = True
            yield Completion(candidate, start_position=-len(partial))

        if manifests_only and not found and not name_part:
            yield Completion(
                "",
                start_position=0,
                display="(no .split files found)",
            )
