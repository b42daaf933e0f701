"""prompt_toolkit completer for BFF source.

Offer function names, `.Property` names of the enclosing function, `#directive`
names and `$Variable$` names depending on what is being typed.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from prompt_toolkit.completion import CompleteEvent, Completer, Completion

from bffkit.completion.context import candidates, completion_context
from bffkit.indent.buffer import Position, SourceBuffer

if TYPE_CHECKING:
    from prompt_toolkit.document import Document


class BffCompleter(Completer):
    """A prompt_toolkit completer for BFF documents.

    The whole document is rescanned for every request, so the completer holds
    no state and can be shared between prompt sessions.
    """

    def get_completions(
        self,
        document: "Document",
        complete_event: CompleteEvent,  # noqa: ARG002
    ) -> Iterable[Completion]:
        """Generate completions for the name being typed at the cursor."""
        buffer = SourceBuffer(document.lines)
        position = Position(document.cursor_position_row, document.cursor_position_col)
        context = completion_context(buffer, position)
        start_position = -len(context.prefix)

        for candidate in candidates(context):
            yield Completion(
                text=candidate.text,
                start_position=start_position,
                display=candidate.text,
                display_meta=candidate.meta,
            )
