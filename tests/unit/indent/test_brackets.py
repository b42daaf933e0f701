"""Tests for backward bracket matching."""

import pytest

from bffkit.indent.brackets import (
    find_opener,
    find_opener_content_column,
    find_trailing_closer_opener,
    match_closer,
    scan_back_for_opener,
)
from bffkit.indent.buffer import Position, SourceBuffer


class TestFindOpener:
    """Opener of the closer a line starts with."""

    def test_simple_block(self):
        """A closing brace finds the brace that opened its block."""
        buffer = SourceBuffer(["Library('x')", "{", "    .A = 1", "}"])
        assert find_opener(buffer, 3) == Position(1, 0)

    def test_nested_blocks(self):
        """Inner closers match inner openers."""
        buffer = SourceBuffer(["{", "    [", "    ]", "}"])
        assert find_opener(buffer, 2) == Position(1, 4)
        assert find_opener(buffer, 3) == Position(0, 0)

    def test_other_bracket_kind_ignored(self):
        """Only brackets of the same kind are counted."""
        buffer = SourceBuffer(["{", "  ]", "}"])
        assert find_opener(buffer, 2) == Position(0, 0)

    def test_brackets_in_strings_and_comments_skipped(self):
        """Closers inside strings and comments do not add depth."""
        buffer = SourceBuffer(["{", "  .A = '}'", "  // }", "  ; }", "}"])
        assert find_opener(buffer, 4) == Position(0, 0)

    def test_block_comment_over_lines_skipped(self):
        """Closers in a multi-line block comment do not add depth."""
        buffer = SourceBuffer(["{", "/* }", "} */", "}"])
        assert find_opener(buffer, 3) == Position(0, 0)

    def test_closer_inside_block_comment_is_not_a_closer(self):
        """A line starting inside a block comment has no closer to match."""
        buffer = SourceBuffer(["{", "/* }", "} */", "}"])
        assert find_opener(buffer, 2) is None

    @pytest.mark.parametrize(
        "lines",
        [["}"], ["x", "]"], ["[", "]", "]"]],
    )
    def test_unmatched_closer(self, lines):
        """A closer with no opener above it gives None."""
        buffer = SourceBuffer(lines)
        assert find_opener(buffer, len(lines) - 1) is None

    def test_line_without_leading_closer(self):
        """Lines not starting with a closer give None."""
        buffer = SourceBuffer(["{", "  x }"])
        assert find_opener(buffer, 1) is None


class TestMatchCloser:
    """Opener of a closer anywhere on a line."""

    def test_mid_line_closer(self):
        """A closer after other code still matches."""
        buffer = SourceBuffer(["Foo() {", "  .A = 1 }"])
        assert match_closer(buffer, Position(1, 9)) == Position(0, 6)

    def test_same_line_pair(self):
        """An opener on the same line is found."""
        buffer = SourceBuffer([".A = { 'a' }"])
        assert match_closer(buffer, Position(0, 11)) == Position(0, 5)

    def test_not_a_closer(self):
        """Characters that are not closers give None."""
        buffer = SourceBuffer(["{ x }"])
        assert match_closer(buffer, Position(0, 2)) is None

    def test_closer_in_string(self):
        """A closer inside a string gives None."""
        buffer = SourceBuffer(["{ '}'"])
        assert match_closer(buffer, Position(0, 3)) is None


class TestScanBackForOpener:
    """The shared backward scan."""

    LINES = ["Library('a')", "{", "    .Arr = {", "        'x',", ""]

    def test_nearest_enclosing_opener(self):
        """Without a predicate the innermost opener is returned."""
        buffer = SourceBuffer(self.LINES)
        assert scan_back_for_opener(buffer, Position(3, 0), "{", "}") == Position(2, 11)

    def test_rejected_opener_is_stepped_over(self):
        """With a predicate the scan continues outward past rejected openers."""
        buffer = SourceBuffer(self.LINES)
        found = scan_back_for_opener(
            buffer,
            Position(3, 0),
            "{",
            "}",
            lambda position: position.line == 1,
        )
        assert found == Position(1, 0)

    def test_closed_blocks_are_skipped(self):
        """Balanced blocks between the start and the opener are skipped."""
        buffer = SourceBuffer(["{", "  { }", "  [ { } ]", "  x"])
        assert scan_back_for_opener(buffer, Position(3, 2), "{", "}") == Position(0, 0)

    def test_top_level(self):
        """Reaching the buffer start gives None."""
        buffer = SourceBuffer(["{", "}", "x"])
        assert scan_back_for_opener(buffer, Position(2, 0), "{", "}") is None


class TestTrailingCloser:
    """Opener of a closer a line ends with."""

    def test_opener_on_earlier_line(self):
        """A trailing closer opened further up is matched."""
        buffer = SourceBuffer([".Libs = { 'a',", "          'b' }"])
        assert find_trailing_closer_opener(buffer, 1) == Position(0, 8)

    def test_opener_on_same_line(self):
        """A pair closed on its own line does not count."""
        buffer = SourceBuffer([".Libs = { 'a' }"])
        assert find_trailing_closer_opener(buffer, 0) is None

    def test_trailing_comment_ignored(self):
        """The last code character is found before a trailing comment."""
        buffer = SourceBuffer(["{", "  'b' } // done"])
        assert find_trailing_closer_opener(buffer, 1) == Position(0, 0)


class TestOpenerContentColumn:
    """Alignment column after an unclosed opener."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("{ .A = 1", 2),
            (".Libs = { 'x',", 10),
            ("{ [ 1,", 4),
            ("  .S = [ .A = 1", 9),
        ],
    )
    def test_content_column(self, text, expected):
        """The first non-blank character after the innermost opener is found."""
        assert find_opener_content_column(SourceBuffer([text]), 0) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "{",
            "Library('x') {",
            ".Libs = { 'x' }",
            "{ // comment",
            "{ /* comment */",
            "x = 1",
        ],
    )
    def test_no_content_column(self, text):
        """Closed or empty openers give None."""
        assert find_opener_content_column(SourceBuffer([text]), 0) is None

    def test_tabs_expanded(self):
        """The column is measured with tabs expanded."""
        buffer = SourceBuffer(["\t{ .A"])
        assert find_opener_content_column(buffer, 0, tab_width=4) == 6
