"""Lexical classifier for BFF source lines.

Classify every character of a line as code, string, line comment or block
comment. The scan is a small forward state machine that carries one value from
line to line: whether the line starts inside a block comment.

BFF lexical rules covered here:

- strings are quoted with `"` or `'` and `^` escapes the next character,
- `//` and `;` start a comment that runs to the end of the line,
- `/* ... */` is a block comment, it does not nest and may span lines.

Strings never span lines. An unterminated quote ends at the end of its line so
that a half-typed string does not poison the rest of the buffer.
"""

from dataclasses import dataclass
from enum import Enum

QUOTES = frozenset("\"'")
"""Characters that open and close a string literal."""

ESCAPE = "^"
"""Escape character inside string literals."""

LINE_COMMENT_MARKERS = ("//", ";")
"""Tokens that start a comment running to the end of the line."""

BLOCK_COMMENT_OPEN = "/*"
"""Token that opens a block comment."""

BLOCK_COMMENT_CLOSE = "*/"
"""Token that closes a block comment."""


class SpanKind(str, Enum):
    """Lexical category of a character."""

    CODE = "code"
    """Plain code, the only kind that affects nesting."""

    STRING = "string"
    """Inside a quoted string, quotes included."""

    LINE_COMMENT = "line_comment"
    """Inside a `//` or `;` comment, marker included."""

    BLOCK_COMMENT = "block_comment"
    """Inside a `/* */` comment, delimiters included."""

    @property
    def is_code(self) -> bool:
        """Check if characters of this kind count for nesting and shapes."""
        return self is SpanKind.CODE


class ScanMode(str, Enum):
    """Scanner mode at a character boundary."""

    CODE = "code"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


@dataclass(frozen=True)
class LexState:
    """Scanner state at a line boundary or inside a line."""

    mode: ScanMode = ScanMode.CODE
    """Current scanner mode."""

    quote: str | None = None
    """Quote character that opened the current string, if in a string."""

    @property
    def in_block_comment(self) -> bool:
        """Check if the scanner is inside a block comment."""
        return self.mode is ScanMode.IN_BLOCK_COMMENT

    @property
    def in_comment(self) -> bool:
        """Check if the scanner is inside any kind of comment."""
        return self.mode in (ScanMode.IN_LINE_COMMENT, ScanMode.IN_BLOCK_COMMENT)

    @property
    def in_string(self) -> bool:
        """Check if the scanner is inside a string literal."""
        return self.mode is ScanMode.IN_STRING


CODE_STATE = LexState()
"""State at the start of a buffer."""

BLOCK_COMMENT_STATE = LexState(ScanMode.IN_BLOCK_COMMENT)
"""State inside an unterminated block comment."""


@dataclass(frozen=True)
class LexicalSpan:
    """A run of characters of the same kind within one line."""

    kind: SpanKind
    """Lexical category of the run."""

    start: int
    """Index of the first character (inclusive)."""

    end: int
    """Index after the last character (exclusive)."""


@dataclass(frozen=True)
class LineLexing:
    """Classification of every character of a single line."""

    text: str
    """The classified line, without its line terminator."""

    kinds: tuple[SpanKind, ...]
    """One kind per character of `text`."""

    end_state: LexState
    """State to start the next line with."""

    def is_code(self, index: int) -> bool:
        """Check if the character at `index` is code."""
        return self.kinds[index].is_code

    def code_chars(self) -> list[tuple[int, str]]:
        """Get `(index, char)` pairs for every code character."""
        return [
            (i, ch) for i, ch in enumerate(self.text) if self.kinds[i].is_code
        ]

    def first_code_index(self) -> int | None:
        """Get the index of the first non-whitespace code character.

        Returns None if the line holds only whitespace, strings or comments
        before any code, that is, if its first non-whitespace character is not
        code.
        """
        for i, ch in enumerate(self.text):
            if ch.isspace():
                continue
            return i if self.kinds[i].is_code else None
        return None

    def last_code_index(self) -> int | None:
        """Get the index of the last non-whitespace code character."""
        for i in range(len(self.text) - 1, -1, -1):
            if self.kinds[i].is_code and not self.text[i].isspace():
                return i
        return None

    def spans(self) -> list[LexicalSpan]:
        """Merge per-character kinds into runs."""
        runs: list[LexicalSpan] = []
        start = 0
        for i in range(1, len(self.kinds) + 1):
            if i == len(self.kinds) or self.kinds[i] is not self.kinds[start]:
                runs.append(LexicalSpan(self.kinds[start], start, i))
                start = i
        return runs


def _scan(text: str, start_state: LexState) -> tuple[list[SpanKind], LexState]:
    """Run the state machine over `text`, returning kinds and the raw final state."""
    kinds: list[SpanKind] = []
    mode = start_state.mode
    quote = start_state.quote
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        if mode is ScanMode.IN_LINE_COMMENT:
            kinds.extend([SpanKind.LINE_COMMENT] * (n - i))
            break
        if mode is ScanMode.IN_BLOCK_COMMENT:
            if text.startswith(BLOCK_COMMENT_CLOSE, i):
                kinds.extend((SpanKind.BLOCK_COMMENT, SpanKind.BLOCK_COMMENT))
                i += len(BLOCK_COMMENT_CLOSE)
                mode = ScanMode.CODE
                continue
            kinds.append(SpanKind.BLOCK_COMMENT)
        elif mode is ScanMode.IN_STRING:
            kinds.append(SpanKind.STRING)
            if ch == ESCAPE and i + 1 < n:
                kinds.append(SpanKind.STRING)
                i += 2
                continue
            if ch == quote:
                mode = ScanMode.CODE
                quote = None
        elif ch in QUOTES:
            kinds.append(SpanKind.STRING)
            mode = ScanMode.IN_STRING
            quote = ch
        elif text.startswith(BLOCK_COMMENT_OPEN, i):
            kinds.extend((SpanKind.BLOCK_COMMENT, SpanKind.BLOCK_COMMENT))
            i += len(BLOCK_COMMENT_OPEN)
            mode = ScanMode.IN_BLOCK_COMMENT
            continue
        elif text.startswith(LINE_COMMENT_MARKERS, i):
            mode = ScanMode.IN_LINE_COMMENT
            continue
        else:
            kinds.append(SpanKind.CODE)
        i += 1
    return kinds, LexState(mode, quote)


def classify_line(text: str, start_state: LexState = CODE_STATE) -> LineLexing:
    """Classify each character of `text`.

    Args:
        text: A single line without its terminator.
        start_state: State carried over from the previous line.

    Returns:
        The per-character classification and the state for the next line.

    """
    kinds, state = _scan(text, start_state)
    # Strings and line comments end with their line.
    end_state = BLOCK_COMMENT_STATE if state.in_block_comment else CODE_STATE
    return LineLexing(text=text, kinds=tuple(kinds), end_state=end_state)


def state_at(text: str, index: int, start_state: LexState = CODE_STATE) -> LexState:
    """Get the scanner state at the boundary just before character `index`.

    Unlike a line's end state this keeps open strings and line comments, so it
    tells whether a cursor at `index` sits inside one.
    """
    return _scan(text[:index], start_state)[1]
