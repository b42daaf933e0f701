"""Per-line nesting change.

A line's scope delta is what it adds to the nesting depth of the lines below it.
Brackets count only outside strings and comments. Conditional directives open a
level of their own because their end is not a bracket.
"""

import re

from bffkit.indent.lexer import LineLexing, classify_line

OPENERS = "{["
"""Characters that open a nesting level."""

CLOSERS = "}]"
"""Characters that close a nesting level."""

PAIRS = {"}": "{", "]": "["}
"""Closer to opener mapping."""

DIRECTIVE_RE = re.compile(r"#\s*([A-Za-z_]\w*)")
"""A `#` directive and its name, starting at the match position."""

OPENING_DIRECTIVES = frozenset({"if", "else"})
"""Directives that indent the lines after them."""

DEDENTING_DIRECTIVES = frozenset({"else", "endif"})
"""Directives that sit one level left of the lines before them."""


def directive_of(lexing: LineLexing) -> str | None:
    """Get the name of the directive the line starts with, if any.

    Returns:
        The directive name without `#` (e.g. `"if"`), or None.

    """
    start = lexing.first_code_index()
    if start is None or lexing.text[start] != "#":
        return None
    match = DIRECTIVE_RE.match(lexing.text, start)
    return match.group(1) if match else None


def scope_delta(line: LineLexing | str) -> int:
    """Compute the nesting change a line contributes.

    Args:
        line: A classified line, or raw text classified from a code start state.

    Returns:
        `+1` for every `{` or `[` and `-1` for every `}` or `]` in code, plus
        `+1` if the line starts with `#if` or `#else`.

    """
    lexing = line if isinstance(line, LineLexing) else classify_line(line)
    delta = 0
    for _, ch in lexing.code_chars():
        if ch in OPENERS:
            delta += 1
        elif ch in CLOSERS:
            delta -= 1
    if directive_of(lexing) in OPENING_DIRECTIVES:
        delta += 1
    return delta
