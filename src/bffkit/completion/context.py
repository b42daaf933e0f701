"""Completion context for BFF source.

Decide what kind of name is being typed at a cursor and which function body the
cursor is in, then pick candidates from the static vocabulary.
"""

import re
from dataclasses import dataclass
from enum import Enum

from bffkit.indent.brackets import iter_code_backward, scan_back_for_opener
from bffkit.indent.buffer import Position, SourceBuffer
from bffkit.indent.lexer import state_at
from bffkit.language.keywords import (
    BUILTIN_VARIABLES,
    DIRECTIVES,
    FUNCTIONS,
    KEYWORDS,
    properties_for,
)
from bffkit.log import get_logger

logger = get_logger(__name__)

_CODE_PREFIX_RE = re.compile(r"([.^#]?)(\w*)$")
_VARIABLE_PREFIX_RE = re.compile(r"\$(\w*)$")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_]\w*$")


class CompletionKind(str, Enum):
    """What kind of name is being typed."""

    PROPERTY = "property"
    """After `.` or `^`: a property of the enclosing function."""

    DIRECTIVE = "directive"
    """After `#`: a preprocessor directive."""

    VARIABLE = "variable"
    """After `$` inside a string: a built-in variable."""

    WORD = "word"
    """A bare word: a function or keyword."""

    NONE = "none"
    """Inside a comment, or a string with no `$` reference."""


@dataclass(frozen=True)
class CompletionContext:
    """Everything candidate lookup needs to know about a cursor."""

    kind: CompletionKind
    """What is being typed."""

    prefix: str = ""
    """The part of the name already typed, without its sigil."""

    function: str | None = None
    """Name of the function whose body encloses the cursor, if any."""


@dataclass(frozen=True)
class Candidate:
    """A single completion candidate."""

    text: str
    """Text to insert in place of the prefix."""

    meta: str
    """Short description of the candidate's kind."""


def function_name_before(buffer: SourceBuffer, brace: Position) -> str | None:
    """Read the function name a `{` at `brace` belongs to.

    Accept `Name(args) {` and `Name {`, with whitespace, newlines and comments
    allowed between the parts.

    Returns:
        The identifier, or None if the brace does not open a function body.

    """
    for position, ch in iter_code_backward(buffer, brace):
        if ch.isspace():
            continue
        if ch == ")":
            paren = scan_back_for_opener(buffer, position, "(", ")")
            if paren is None:
                return None
            return _identifier_ending_before(buffer, paren)
        return _identifier_ending_before(buffer, Position(position.line, position.column + 1))
    return None


def _identifier_ending_before(buffer: SourceBuffer, end: Position) -> str | None:
    """Read the identifier that ends just before `end`, skipping whitespace."""
    for position, ch in iter_code_backward(buffer, end):
        if ch.isspace():
            continue
        match = _IDENTIFIER_RE.search(buffer[position.line][: position.column + 1])
        return match.group(0) if match else None
    return None


def find_enclosing_function(buffer: SourceBuffer, position: Position) -> str | None:
    """Find the function whose `{ }` body encloses `position`.

    Blocks that are not function bodies (array literals, structs) are stepped
    over and the search continues outward.

    Returns:
        The function name, or None at top level.

    """
    names: list[str] = []

    def is_function_body(brace: Position) -> bool:
        name = function_name_before(buffer, brace)
        if name is None:
            return False
        names.append(name)
        return True

    if scan_back_for_opener(buffer, position, "{", "}", is_function_body) is None:
        return None
    return names[-1]


def completion_context(buffer: SourceBuffer, position: Position) -> CompletionContext:
    """Work out what is being typed at `position`.

    Args:
        buffer: The text.
        position: Cursor position; the column may equal the line length.

    Returns:
        The completion context.

    """
    text = buffer[position.line]
    column = min(position.column, len(text))
    state = state_at(text, column, buffer.start_state(position.line))
    before = text[:column]

    if state.in_comment:
        return CompletionContext(CompletionKind.NONE)

    if state.in_string:
        match = _VARIABLE_PREFIX_RE.search(before)
        if match is None:
            return CompletionContext(CompletionKind.NONE)
        return CompletionContext(CompletionKind.VARIABLE, prefix=match.group(1))

    match = _CODE_PREFIX_RE.search(before)
    sigil, prefix = (match.group(1), match.group(2)) if match else ("", "")
    if sigil == "#":
        return CompletionContext(CompletionKind.DIRECTIVE, prefix=prefix)
    if sigil in (".", "^"):
        function = find_enclosing_function(buffer, Position(position.line, column))
        logger.debug("Property completion inside %s", function or "top level")
        return CompletionContext(CompletionKind.PROPERTY, prefix=prefix, function=function)
    return CompletionContext(CompletionKind.WORD, prefix=prefix)


def candidates(context: CompletionContext) -> list[Candidate]:
    """Get the candidates matching a context, sorted case-insensitively.

    Matching is a case-insensitive prefix test. Property lookups for an unknown
    function, or outside of any function, offer every property.
    """
    if context.kind is CompletionKind.PROPERTY:
        pool = [(name, "property") for name in properties_for(context.function)]
    elif context.kind is CompletionKind.DIRECTIVE:
        pool = [(name, "directive") for name in DIRECTIVES]
    elif context.kind is CompletionKind.VARIABLE:
        pool = [(name, "variable") for name in BUILTIN_VARIABLES]
    elif context.kind is CompletionKind.WORD:
        pool = [(name, "function") for name in FUNCTIONS]
        pool += [(name, "keyword") for name in KEYWORDS]
    else:
        return []

    prefix = context.prefix.lower()
    seen: set[str] = set()
    result: list[Candidate] = []
    for name, meta in sorted(pool, key=lambda item: item[0].lower()):
        if name in seen or not name.lower().startswith(prefix):
            continue
        seen.add(name)
        result.append(Candidate(text=name, meta=meta))
    return result
