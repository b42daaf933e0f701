"""Tests for reindenting whole buffers and ranges."""

from bffkit.indent.indenter import BffIndenter
from bffkit.indent.settings import IndentSettings

MESSY = [
    "Library('Core')",
    "      {",
    "  .Compiler = 'MSVC'",
    "  .CompilerOptions = '%1'",
    "  + ' /c'",
    "        #if __WINDOWS__",
    ".X = 1",
    "   #endif",
    "}",
]

EXPECTED = [
    "Library('Core')",
    "{",
    "    .Compiler = 'MSVC'",
    "    .CompilerOptions = '%1'",
    " " * 21 + "+ ' /c'",
    "    #if __WINDOWS__",
    "        .X = 1",
    "    #endif",
    "}",
]


class TestReindent:
    """BffIndenter.reindent and reindent_text."""

    def test_reindent_messy_buffer(self, indenter):
        """Each line is indented against the reindented lines above it."""
        assert indenter.reindent(MESSY) == EXPECTED

    def test_reindent_is_idempotent(self, indenter):
        """Reindenting twice gives the same result as once."""
        once = indenter.reindent(MESSY)
        assert indenter.reindent(once) == once

    def test_well_formed_file_unchanged(self, indenter, well_formed_lines):
        """A consistently indented file is left as it is."""
        assert indenter.reindent(well_formed_lines) == well_formed_lines

    def test_input_not_modified(self, indenter):
        """The caller's list is left alone."""
        lines = list(MESSY)
        indenter.reindent(lines)
        assert lines == MESSY

    def test_blank_lines_emptied(self, indenter):
        """Whitespace-only lines become empty."""
        assert indenter.reindent(["{", "   \t", "x", "}"]) == ["{", "", "    x", "}"]

    def test_range(self, indenter):
        """Only lines in the range are touched."""
        lines = ["{", "    x", "  y", "z", "}"]
        assert indenter.reindent(lines, start=2, end=3) == ["{", "    x", "    y", "z", "}"]

    def test_range_past_end(self, indenter):
        """An end past the last line stops at the last line."""
        assert indenter.reindent(["{", "x"], start=1, end=10) == ["{", "    x"]

    def test_block_comment_body_kept(self, indenter):
        """Lines that start inside a block comment keep their text."""
        lines = ["{", "/*", "   keep me", "*/", "}"]
        result = indenter.reindent(lines)
        assert result[1] == "    /*"
        assert result[2:4] == ["   keep me", "*/"]

    def test_use_tabs(self):
        """Whole tab stops are emitted as tabs, the rest as spaces."""
        indenter = BffIndenter(IndentSettings(use_tabs=True, tab_width=4))
        lines = ["{", ".A = 'x'", "+ 'y'", "}"]
        assert indenter.reindent(lines) == ["{", "\t.A = 'x'", "\t   + 'y'", "}"]

    def test_reindent_text_keeps_final_newline(self, indenter):
        """A trailing newline survives, and none is added."""
        assert indenter.reindent_text("{\nx\n}\n") == "{\n    x\n}\n"
        assert indenter.reindent_text("{\nx\n}") == "{\n    x\n}"

    def test_reindent_text_keeps_form_feed_and_line_separator(self, indenter):
        """Only `\\n` ends a line, other separators are line content."""
        text = "Print('a\x0cb')\n{\n.X = 'c\u2028d'\n}\n"
        assert indenter.reindent_text(text) == (
            "Print('a\x0cb')\n{\n    .X = 'c\u2028d'\n}\n"
        )

    def test_reindent_text_normalizes_line_endings(self, indenter):
        """CRLF input comes back with LF line endings."""
        assert indenter.reindent_text("{\r\nx\r\n}\r\n") == "{\n    x\n}\n"
