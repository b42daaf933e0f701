"""Indentation engine for BFF source.

Compute the indent of any line from bracket nesting, `+` continuation chains and
`#if`/`#else`/`#endif` directives, without parsing the file.
"""

from bffkit.indent.brackets import (
    find_opener,
    find_opener_content_column,
    match_closer,
    scan_back_for_opener,
)
from bffkit.indent.buffer import Position, SourceBuffer, indentation_of, visual_column
from bffkit.indent.continuation import ChainStart, is_continuation, resolve_chain_start
from bffkit.indent.indenter import (
    BffIndenter,
    IndentDecision,
    LineShape,
    compute_indent,
)
from bffkit.indent.lexer import (
    LexicalSpan,
    LexState,
    LineLexing,
    SpanKind,
    classify_line,
    state_at,
)
from bffkit.indent.scope import directive_of, scope_delta
from bffkit.indent.settings import IndentSettings

__all__ = [
    "BffIndenter",
    "ChainStart",
    "IndentDecision",
    "IndentSettings",
    "LexState",
    "LexicalSpan",
    "LineLexing",
    "LineShape",
    "Position",
    "SourceBuffer",
    "SpanKind",
    "classify_line",
    "compute_indent",
    "directive_of",
    "find_opener",
    "find_opener_content_column",
    "indentation_of",
    "is_continuation",
    "match_closer",
    "resolve_chain_start",
    "scan_back_for_opener",
    "scope_delta",
    "state_at",
    "visual_column",
]
