"""Custom completer for the TinyDFS console with filename autocompletion."""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS, FILENAME_COMMANDS
from namenode.metadata_registry import MetadataRegistry


class TinyDFSCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Registered filename completion for the 'get' and 'corrupt' commands
    """

    def __init__(self, registry: MetadataRegistry):
        self.registry = registry

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.

        For the first token, completes command names.
        For the single argument of 'get'/'corrupt', completes registered filenames.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        if command not in FILENAME_COMMANDS:
            return

        args_typed = len(tokens) - 1
        if is_typing_new_token and args_typed == 0:
            current_word = ""
        elif not is_typing_new_token and args_typed == 1:
            current_word = tokens[-1]
        else:
            return

        yield from self._complete_filenames(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_filenames(self, partial: str) -> Iterable[Completion]:
        """Complete filenames currently registered in the name node."""
        filenames = sorted(summary.filename for summary in self.registry.list_files())

        if not filenames:
            if not partial:
                yield Completion(
                    "",
                    start_position=0,
                    display="(no files stored yet)",
                )
            return

        for filename in filenames:
            if filename.startswith(partial):
                yield Completion(filename, start_position=-len(partial))
