"""Tests for the prompt_toolkit BFF completer."""

from unittest.mock import MagicMock

import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import to_plain_text

from bffkit.completion.completer import BffCompleter


def _get_completions(text: str, cursor_offset: int = 0) -> list[Completion]:
    doc = Document(text, len(text) + cursor_offset)
    return list(BffCompleter().get_completions(doc, MagicMock()))


@pytest.fixture
def settings_body() -> str:
    return "Settings\n{\n    .Work"


class TestBffCompleter:
    """Completions produced from a prompt_toolkit document."""

    def test_property_completions(self, settings_body):
        """Properties of the enclosing function replace the typed prefix."""
        completions = _get_completions(settings_body)
        assert [c.text for c in completions] == ["WorkerConnectionLimit", "Workers"]
        assert all(c.start_position == -len("Work") for c in completions)

    def test_display_meta(self, settings_body):
        """Each completion is labeled with its kind."""
        completions = _get_completions(settings_body)
        assert {to_plain_text(c.display_meta) for c in completions} == {"property"}

    def test_cursor_in_middle_of_document(self):
        """Only the text before the cursor is the prefix."""
        text = "#in\n.A = 1"
        completions = _get_completions(text, cursor_offset=-len("\n.A = 1"))
        assert [c.text for c in completions] == ["include"]
        assert completions[0].start_position == -2

    def test_word_completions(self):
        """Bare words complete to functions."""
        completions = _get_completions("Vis")
        assert [c.text for c in completions] == []

        completions = _get_completions("VS")
        assert [c.text for c in completions] == ["VSProjectExternal", "VSSolution"]

    def test_no_completions_in_comment(self):
        """Nothing is offered inside a comment."""
        assert _get_completions("// Lib") == []

    def test_empty_document(self):
        """An empty document offers every function and keyword."""
        completions = _get_completions("")
        texts = [c.text for c in completions]
        assert "Library" in texts
        assert "true" in texts
        assert all(c.start_position == 0 for c in completions)
