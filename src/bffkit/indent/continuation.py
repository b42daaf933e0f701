"""Continuation chains.

BFF statements can be continued on following lines that start with `+`:

    .Options = '-O2'
             + ' -g'
             + ' -Wall'
    .Next = 1

The line after a chain belongs with the statement that started it, not with the
last continuation line, so its indent is derived from that statement.
"""

from dataclasses import dataclass

from bffkit.indent.buffer import SourceBuffer, indentation_of
from bffkit.indent.scope import scope_delta
from bffkit.log import get_logger

logger = get_logger(__name__)

CONTINUATION_MARKER = "+"
"""First code character of a continuation line."""


@dataclass(frozen=True)
class ChainStart:
    """The statement a continuation chain extends."""

    base_indent: int
    """Indentation of the statement line."""

    scope_delta: int
    """Scope delta of the statement line."""

    line: int | None
    """Index of the statement line, None when the chain has no statement."""


def is_continuation(buffer: SourceBuffer, line_index: int) -> bool:
    """Check if line `line_index` starts with the continuation marker."""
    lexing = buffer.lexing(line_index)
    start = lexing.first_code_index()
    return start is not None and lexing.text[start] == CONTINUATION_MARKER


def resolve_chain_start(buffer: SourceBuffer, line_index: int, tab_width: int = 4) -> ChainStart:
    """Find the statement behind the chain that ends just above `line_index`.

    Walk back over the maximal run of continuation lines above `line_index`,
    skipping blank lines, and describe the non-blank line before the run.

    Args:
        buffer: Buffer to inspect.
        line_index: The line after the chain.
        tab_width: Width of a tab when measuring indentation.

    Returns:
        The statement's indentation and scope delta. A chain that reaches the
        buffer start resolves to its first line's indentation and a delta of 0.

    """
    candidate = buffer.previous_nonblank(line_index)
    first_in_chain: int | None = None
    while candidate is not None and is_continuation(buffer, candidate):
        first_in_chain = candidate
        candidate = buffer.previous_nonblank(candidate)

    if candidate is None:
        if first_in_chain is None:
            return ChainStart(base_indent=0, scope_delta=0, line=None)
        logger.debug("Continuation chain at line %d has no statement", first_in_chain)
        return ChainStart(
            base_indent=indentation_of(buffer[first_in_chain], tab_width),
            scope_delta=0,
            line=None,
        )

    return ChainStart(
        base_indent=indentation_of(buffer[candidate], tab_width),
        scope_delta=scope_delta(buffer.lexing(candidate)),
        line=candidate,
    )
