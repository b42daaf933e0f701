"""Bracket matching by backward counting scans.

Every lookup here walks characters right to left, skipping strings and comments,
and keeps a depth counter for one bracket kind. The same primitive serves both
"where is the opener of this closer" and "which block encloses this position".
"""

from collections.abc import Callable, Iterator

from bffkit.indent.buffer import Position, SourceBuffer, visual_column
from bffkit.indent.lexer import SpanKind
from bffkit.indent.scope import CLOSERS, OPENERS, PAIRS
from bffkit.log import get_logger

logger = get_logger(__name__)


def iter_code_backward(buffer: SourceBuffer, before: Position) -> Iterator[tuple[Position, str]]:
    """Yield code characters strictly before `before`, nearest first."""
    for line in range(before.line, -1, -1):
        lexing = buffer.lexing(line)
        end = min(before.column, len(lexing.text)) if line == before.line else len(lexing.text)
        for column in range(end - 1, -1, -1):
            if lexing.kinds[column].is_code:
                yield Position(line, column), lexing.text[column]


def scan_back_for_opener(
    buffer: SourceBuffer,
    before: Position,
    opener: str,
    closer: str,
    accept: Callable[[Position], bool] | None = None,
) -> Position | None:
    """Find the unmatched `opener` that encloses `before`.

    Scan backward from just before `before` with a depth of 1. Each `closer`
    seen adds a level and each `opener` removes one. When the depth reaches 0
    the opener is a candidate. Without `accept` the first candidate is the
    answer. With `accept`, rejected candidates are stepped over and the scan
    continues outward to the next enclosing opener.

    Args:
        buffer: Buffer to scan.
        before: Position the scan starts left of.
        opener: Opening bracket character.
        closer: Closing bracket character.
        accept: Optional predicate applied to each depth-0 opener.

    Returns:
        Position of the accepted opener, or None when the buffer start is
        reached first.

    """
    depth = 1
    for position, ch in iter_code_backward(buffer, before):
        if ch == closer:
            depth += 1
        elif ch == opener:
            depth -= 1
            if depth == 0:
                if accept is None or accept(position):
                    return position
                depth = 1
    return None


def match_closer(buffer: SourceBuffer, closer_at: Position) -> Position | None:
    """Find the opener matching the closing bracket at `closer_at`.

    Returns:
        The opener's position, or None if the character is not a closing
        bracket in code or has no match.

    """
    lexing = buffer.lexing(closer_at.line)
    ch = lexing.text[closer_at.column]
    if ch not in CLOSERS or lexing.kinds[closer_at.column] is not SpanKind.CODE:
        return None
    found = scan_back_for_opener(buffer, closer_at, PAIRS[ch], ch)
    if found is None:
        logger.debug("No opener for %r at %s", ch, closer_at)
    return found


def find_opener(buffer: SourceBuffer, line_index: int) -> Position | None:
    """Find the opener of the closing bracket line `line_index` starts with.

    Returns:
        The opener's position, or None if the line does not start with a
        closer or the closer is unmatched.

    """
    lexing = buffer.lexing(line_index)
    start = lexing.first_code_index()
    if start is None or lexing.text[start] not in CLOSERS:
        return None
    return match_closer(buffer, Position(line_index, start))


def find_trailing_closer_opener(buffer: SourceBuffer, line_index: int) -> Position | None:
    """Find the opener of the closing bracket line `line_index` ends with.

    Returns:
        The opener's position when the line's last code character is a closer
        matched on an earlier line, otherwise None.

    """
    lexing = buffer.lexing(line_index)
    end = lexing.last_code_index()
    if end is None or lexing.text[end] not in CLOSERS:
        return None
    found = match_closer(buffer, Position(line_index, end))
    if found is None or found.line == line_index:
        return None
    return found


def find_opener_content_column(
    buffer: SourceBuffer,
    line_index: int,
    tab_width: int = 4,
) -> int | None:
    """Find where content after an unclosed opener starts on line `line_index`.

    For `{ .A = 1` this is the column of `.A`, so the lines below can align
    with it.

    Returns:
        Visual column of the first non-whitespace character after the
        innermost opener left open on the line, or None if every opener is
        closed on the line or nothing but whitespace or a comment follows it.

    """
    lexing = buffer.lexing(line_index)
    stack: list[int] = []
    for index, ch in lexing.code_chars():
        if ch in OPENERS:
            stack.append(index)
        elif ch in CLOSERS and stack and lexing.text[stack[-1]] == PAIRS[ch]:
            stack.pop()
    if not stack:
        return None
    text = lexing.text
    for index in range(stack[-1] + 1, len(text)):
        if text[index].isspace():
            continue
        if lexing.kinds[index] in (SpanKind.LINE_COMMENT, SpanKind.BLOCK_COMMENT):
            return None
        return visual_column(text, index, tab_width)
    return None
