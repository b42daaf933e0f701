"""Indent decision procedure for BFF source.

Work out the indent of one line from that line's first token and the previous
non-blank line. Each line falls into exactly one `LineShape`, tried in this
order:

1. first line of the buffer (or only blank lines above): column 0,
2. starts with `+`: align with the previous `+`, else the previous `=`,
3. starts with `}` or `]`: indent of the line holding the matching opener,
4. starts with `#else` or `#endif`: one level left of where the previous line
   would put an ordinary line,
5. previous line ends a continuation chain: derive from the chain's statement,
6. previous line starts with a closer: indent of that closer's opener line,
7. previous line ends with a closer opened further up: indent of the opener line,
8. previous line leaves an opener with content after it: align with the content,
9. otherwise: previous indent plus its scope delta in indent units.

Lookups that find no structure (unmatched brackets, a chain with no statement)
fall back to a safe column instead of raising.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from bffkit.indent.brackets import (
    find_opener,
    find_opener_content_column,
    find_trailing_closer_opener,
)
from bffkit.indent.buffer import (
    Position,
    SourceBuffer,
    indentation_of,
    split_lines,
    visual_column,
)
from bffkit.indent.continuation import (
    CONTINUATION_MARKER,
    is_continuation,
    resolve_chain_start,
)
from bffkit.indent.scope import CLOSERS, DEDENTING_DIRECTIVES, directive_of, scope_delta
from bffkit.indent.settings import DEFAULT_INDENT_UNIT, IndentSettings
from bffkit.log import get_logger

logger = get_logger(__name__)

ASSIGNMENT_OPERATOR = "="
"""Operator continuation lines align with when no `+` is above them."""


class LineShape(str, Enum):
    """What decided a line's indent."""

    BUFFER_START = "buffer_start"
    CONTINUATION = "continuation"
    CLOSER = "closer"
    DEDENT_DIRECTIVE = "dedent_directive"
    AFTER_CONTINUATION = "after_continuation"
    AFTER_CLOSER = "after_closer"
    AFTER_TRAILING_CLOSER = "after_trailing_closer"
    AFTER_OPENER_CONTENT = "after_opener_content"
    DEFAULT = "default"


@dataclass(frozen=True)
class IndentDecision:
    """A computed indent and the shape that produced it."""

    shape: LineShape
    """The rule that decided the indent."""

    indent: int
    """Indent width in columns, never negative."""


class BffIndenter:
    """Compute indentation for lines of BFF source.

    The indenter only holds its settings, so one instance can answer queries
    for any number of buffers, from any number of threads, as long as each
    caller passes its own buffer.
    """

    def __init__(self, settings: IndentSettings | None = None) -> None:
        """Initialize the BffIndenter.

        Args:
            settings: Indentation settings, defaults when omitted.

        """
        self.settings = settings or IndentSettings()

    @property
    def indent_unit(self) -> int:
        """Columns per nesting level."""
        return self.settings.indent_unit

    def indent_for(self, buffer: SourceBuffer | Sequence[str], line_index: int) -> int:
        """Compute the indent width for line `line_index`.

        Args:
            buffer: The text, as a SourceBuffer or a sequence of lines.
            line_index: 0-indexed line to indent.

        Returns:
            Indent width in columns.

        Raises:
            IndexError: If `line_index` is outside of the buffer.

        """
        return self.decide(buffer, line_index).indent

    def decide(self, buffer: SourceBuffer | Sequence[str], line_index: int) -> IndentDecision:
        """Compute the indent for line `line_index` and report which rule applied."""
        buf = SourceBuffer.of(buffer)
        buf.check_line(line_index)

        shape, indent = self._decide(buf, line_index)
        decision = IndentDecision(shape=shape, indent=max(0, indent))
        logger.debug("Line %d: %s -> %d", line_index, shape.value, decision.indent)
        return decision

    def _decide(self, buf: SourceBuffer, line_index: int) -> tuple[LineShape, int]:
        prev = buf.previous_nonblank(line_index)
        if prev is None:
            return LineShape.BUFFER_START, 0

        lexing = buf.lexing(line_index)
        start = lexing.first_code_index()
        first = lexing.text[start] if start is not None else ""

        if first == CONTINUATION_MARKER:
            return LineShape.CONTINUATION, self._continuation_column(buf, prev)

        if first in CLOSERS:
            opener = find_opener(buf, line_index)
            return LineShape.CLOSER, self._line_indent_of(buf, opener)

        if directive_of(lexing) in DEDENTING_DIRECTIVES:
            _, next_indent = self._after(buf, line_index, prev)
            return LineShape.DEDENT_DIRECTIVE, next_indent - self.indent_unit

        return self._after(buf, line_index, prev)

    def _after(self, buf: SourceBuffer, line_index: int, prev: int) -> tuple[LineShape, int]:
        """Indent an ordinary line would get below line `prev`."""
        tab_width = self.settings.tab_width

        if is_continuation(buf, prev):
            chain = resolve_chain_start(buf, line_index, tab_width)
            indent = chain.base_indent + chain.scope_delta * self.indent_unit
            return LineShape.AFTER_CONTINUATION, indent

        opener = find_opener(buf, prev)
        if opener is not None or self._starts_with_closer(buf, prev):
            return LineShape.AFTER_CLOSER, self._line_indent_of(buf, opener)

        opener = find_trailing_closer_opener(buf, prev)
        if opener is not None:
            return LineShape.AFTER_TRAILING_CLOSER, self._line_indent_of(buf, opener)

        content_column = find_opener_content_column(buf, prev, tab_width)
        if content_column is not None:
            return LineShape.AFTER_OPENER_CONTENT, content_column

        prev_indent = indentation_of(buf[prev], tab_width)
        return LineShape.DEFAULT, prev_indent + scope_delta(buf.lexing(prev)) * self.indent_unit

    def _continuation_column(self, buf: SourceBuffer, prev: int) -> int:
        """Column a `+` line aligns with, given the previous non-blank line."""
        tab_width = self.settings.tab_width
        lexing = buf.lexing(prev)
        if is_continuation(buf, prev):
            start = lexing.first_code_index()
            if start is not None:
                return visual_column(lexing.text, start, tab_width)
        for index, ch in lexing.code_chars():
            if ch == ASSIGNMENT_OPERATOR:
                return visual_column(lexing.text, index, tab_width)
        return indentation_of(lexing.text, tab_width)

    def _line_indent_of(self, buf: SourceBuffer, opener: Position | None) -> int:
        if opener is None:
            return 0
        return indentation_of(buf[opener.line], self.settings.tab_width)

    @staticmethod
    def _starts_with_closer(buf: SourceBuffer, line_index: int) -> bool:
        lexing = buf.lexing(line_index)
        start = lexing.first_code_index()
        return start is not None and lexing.text[start] in CLOSERS

    def reindent(
        self,
        lines: Sequence[str],
        start: int = 0,
        end: int | None = None,
    ) -> list[str]:
        """Reindent lines `start` to `end` (exclusive), top to bottom.

        Each line is indented against the already reindented lines above it, the
        way an editor reindents a selected region. Blank lines in the range
        become empty. Lines that begin inside a block comment keep their text.

        Args:
            lines: The buffer's lines.
            start: First line to reindent.
            end: Line after the last one to reindent, defaults to the end.

        Returns:
            A new list with every line of `lines`, the range reindented.

        """
        buf = SourceBuffer(lines)
        stop = len(buf) if end is None else min(end, len(buf))
        changed = 0
        for i in range(max(start, 0), stop):
            text = buf[i]
            if not text.strip():
                buf.set_line(i, "")
                continue
            if buf.start_state(i).in_block_comment:
                continue
            indent = self.settings.indent_string(self.indent_for(buf, i))
            new_text = indent + text.lstrip(" \t\f")
            if new_text != text:
                buf.set_line(i, new_text)
                changed += 1
        logger.debug("Reindented lines %d..%d, %d changed", start, stop, changed)
        return list(buf.lines)

    def reindent_text(self, text: str) -> str:
        """Reindent a whole document, keeping its final newline if it has one."""
        lines = self.reindent(split_lines(text))
        result = "\n".join(lines)
        if text.endswith("\n"):
            result += "\n"
        return result


def compute_indent(
    buffer: SourceBuffer | Sequence[str],
    line_index: int,
    indent_unit: int = DEFAULT_INDENT_UNIT,
) -> int:
    """Compute the indent width for one line of BFF source.

    Args:
        buffer: The text, as a SourceBuffer or a sequence of lines.
        line_index: 0-indexed line to indent.
        indent_unit: Columns per nesting level.

    Returns:
        Indent width in columns.

    Raises:
        ConfigurationError: If `indent_unit` is not a positive integer.
        IndexError: If `line_index` is outside of the buffer.

    """
    settings = IndentSettings.create(indent_unit=indent_unit)
    return BffIndenter(settings).indent_for(buffer, line_index)
