"""Context-aware completion for BFF source."""

from bffkit.completion.completer import BffCompleter
from bffkit.completion.context import (
    Candidate,
    CompletionContext,
    CompletionKind,
    candidates,
    completion_context,
    find_enclosing_function,
    function_name_before,
)

__all__ = [
    "BffCompleter",
    "Candidate",
    "CompletionContext",
    "CompletionKind",
    "candidates",
    "completion_context",
    "find_enclosing_function",
    "function_name_before",
]
