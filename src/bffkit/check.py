"""Report lines whose indentation differs from the computed one."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from bffkit.indent.buffer import indentation_of
from bffkit.indent.indenter import BffIndenter
from bffkit.log import get_logger

if TYPE_CHECKING:
    from rich.console import Console

logger = get_logger(__name__)


@dataclass(frozen=True)
class IndentIssue:
    """A line that reindenting would change."""

    line: int
    """Line number (1-indexed)."""

    expected: int
    """Computed indent width."""

    actual: int
    """Current indent width."""

    text: str
    """The line as it is now."""

    @property
    def message(self) -> str:
        """Describe the problem (no leading capital, no trailing period)."""
        if self.expected == self.actual:
            return f"indent of {self.actual} uses the wrong whitespace"
        return f"expected indent of {self.expected}, found {self.actual}"


def find_indent_issues(
    lines: Sequence[str],
    indenter: BffIndenter,
) -> list[IndentIssue]:
    """Compare every non-blank line with its reindented form.

    Args:
        lines: The source lines.
        indenter: Indenter to compute expected indentation with.

    Returns:
        One issue per non-blank line whose leading whitespace would change.

    """
    tab_width = indenter.settings.tab_width
    reindented = indenter.reindent(lines)
    issues = [
        IndentIssue(
            line=i + 1,
            expected=indentation_of(new, tab_width),
            actual=indentation_of(old, tab_width),
            text=old,
        )
        for i, (old, new) in enumerate(zip(lines, reindented, strict=True))
        if old.strip() and old.rstrip("\r\n") != new
    ]
    logger.debug("Found %d indentation issues in %d lines", len(issues), len(lines))
    return issues


def render_issues(issues: Sequence[IndentIssue], console: "Console", label: str) -> None:
    """Print issues as a table."""
    if not issues:
        console.print(f"[green]{escape(label)}: indentation is consistent[/green]")
        return

    table = Table(
        show_header=True,
        header_style="bold cyan",
        show_edge=False,
        show_lines=False,
        box=None,
    )
    table.add_column("Line", justify="right", style="blue")
    table.add_column("Problem", style="yellow")
    table.add_column("Source", style="dim", no_wrap=True)

    for issue in issues:
        table.add_row(str(issue.line), issue.message, escape(issue.text.strip()))

    console.print(f"[bold]{escape(label)}[/bold]: {len(issues)} line(s) to reindent")
    console.print(table)
