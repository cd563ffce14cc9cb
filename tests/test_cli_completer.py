"""Tests for TinyDFSCompleter."""

import pytest

from prompt_toolkit.document import Document

from cli.completer import TinyDFSCompleter
from cli.constants import COMMANDS
from common.types import BlockDescriptor
from namenode.metadata_registry import MetadataRegistry


@pytest.fixture
def registry():
    reg = MetadataRegistry()
    block = BlockDescriptor(block_id="b0", block_index=0, size=1, checksum="0" * 64, node_index=0)
    for name in ("alpha.txt", "archive.bin", "notes.md"):
        reg.register_file(name, [block])
    return reg


@pytest.fixture
def completer(registry):
    return TinyDFSCompleter(registry)


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def get_completions_display(completer, text):
    """Helper to get list of completion display texts from completer."""
    doc = Document(text, len(text))
    return [c.display for c in completer.get_completions(doc, None)]


class TestCommandCompletion:

    def test_empty_input_shows_all_commands(self, completer):
        completions = get_completions_list(completer, "")
        for cmd in COMMANDS:
            assert cmd in completions

    def test_partial_command_filters(self, completer):
        completions = get_completions_list(completer, "c")
        assert completions == ["corrupt", "clear"]

    def test_command_completion_case_insensitive(self, completer):
        assert "get" in get_completions_list(completer, "GE")


class TestFilenameCompletion:

    def test_get_shows_registered_files(self, completer):
        assert get_completions_list(completer, "get ") == ["alpha.txt", "archive.bin", "notes.md"]

    def test_partial_filename_filters(self, completer):
        assert get_completions_list(completer, "corrupt a") == ["alpha.txt", "archive.bin"]

    def test_no_completion_after_first_argument(self, completer):
        assert get_completions_list(completer, "get alpha.txt ") == []

    def test_put_does_not_complete_filenames(self, completer):
        assert get_completions_list(completer, "put ") == []

    def test_empty_registry_shows_message(self):
        completer = TinyDFSCompleter(MetadataRegistry())
        displays = get_completions_display(completer, "get ")
        assert any("no files stored" in str(d) for d in displays)
