"""Line buffer snapshot with cached lexical state.

The buffer is a snapshot of the caller's text. Lines are classified lazily and in
order, each line starting from the end state of the one above it, so a full
classification costs one pass over the text no matter how many queries are made.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from bffkit.indent.lexer import CODE_STATE, LexState, LineLexing, SpanKind, classify_line


@dataclass(frozen=True, order=True)
class Position:
    """A character position inside a SourceBuffer (both parts 0-indexed)."""

    line: int
    """Line index."""

    column: int
    """Character index within the line."""


class SourceBuffer:
    """Ordered sequence of text lines, read-only to indent queries."""

    def __init__(self, lines: Iterable[str]) -> None:
        """Initialize the SourceBuffer.

        Args:
            lines: The buffer's lines. Trailing `\\r` and `\\n` are stripped.

        """
        self._lines: list[str] = [line.rstrip("\r\n") for line in lines]
        self._lexed: list[LineLexing] = []

    @classmethod
    def from_text(cls, text: str) -> "SourceBuffer":
        """Create a buffer by splitting `text` into lines."""
        return cls(split_lines(text))

    @classmethod
    def of(cls, buffer: "SourceBuffer | Sequence[str]") -> "SourceBuffer":
        """Wrap a plain sequence of lines, or return an existing buffer as is."""
        if isinstance(buffer, SourceBuffer):
            return buffer
        return cls(buffer)

    def __len__(self) -> int:
        """Get the number of lines."""
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        """Get the text of line `index`."""
        return self._lines[index]

    @property
    def lines(self) -> tuple[str, ...]:
        """All lines of the buffer."""
        return tuple(self._lines)

    def set_line(self, index: int, text: str) -> None:
        """Replace line `index` in a buffer the caller owns.

        Cached classification from `index` on is dropped. Never call this while
        a query on the same buffer is in progress.
        """
        self.check_line(index)
        self._lines[index] = text.rstrip("\r\n")
        del self._lexed[index:]

    def check_line(self, index: int) -> None:
        """Reject line indexes outside of the buffer.

        Raises:
            IndexError: If `index` is negative or past the last line.

        """
        if not 0 <= index < len(self._lines):
            msg = f"line {index} is out of range for a buffer of {len(self._lines)} lines"
            raise IndexError(msg)

    def lexing(self, index: int) -> LineLexing:
        """Get the lexical classification of line `index`."""
        self.check_line(index)
        while len(self._lexed) <= index:
            n = len(self._lexed)
            state = self._lexed[-1].end_state if self._lexed else CODE_STATE
            self._lexed.append(classify_line(self._lines[n], state))
        return self._lexed[index]

    def start_state(self, index: int) -> LexState:
        """Get the scanner state line `index` starts in."""
        self.check_line(index)
        return self.lexing(index - 1).end_state if index else CODE_STATE

    def kind_at(self, position: Position) -> SpanKind:
        """Get the lexical kind of the character at `position`."""
        return self.lexing(position.line).kinds[position.column]

    def is_blank(self, index: int) -> bool:
        """Check if line `index` holds only whitespace."""
        return not self._lines[index].strip()

    def previous_nonblank(self, index: int) -> int | None:
        """Get the index of the closest non-blank line above `index`."""
        for i in range(min(index, len(self._lines)) - 1, -1, -1):
            if not self.is_blank(i):
                return i
        return None


def split_lines(text: str) -> list[str]:
    """Split `text` on `\\n` and `\\r\\n` only.

    Form feeds, `\\u2028` and the other characters `str.splitlines` breaks on stay
    inside their line. A final line terminator does not start an extra line, and an
    empty text is one empty line.
    """
    lines = text.split("\n")
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def indentation_of(text: str, tab_width: int) -> int:
    """Get the width of the leading whitespace of `text`, tabs expanded."""
    width = 0
    for ch in text:
        if ch == "\t":
            width += tab_width - width % tab_width
        elif ch in " \f":
            width += 1
        else:
            break
    return width


def visual_column(text: str, index: int, tab_width: int) -> int:
    """Get the display column of character `index` of `text`, tabs expanded."""
    column = 0
    for ch in text[:index]:
        if ch == "\t":
            column += tab_width - column % tab_width
        else:
            column += 1
    return column
