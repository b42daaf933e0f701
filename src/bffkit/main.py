"""bffkit CLI entry point."""

import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bffkit.args import Args, bind_and_run
from bffkit.check import find_indent_issues, render_issues
from bffkit.completion.context import candidates, completion_context
from bffkit.config_loader import load_settings
from bffkit.errors import ConfigurationError
from bffkit.indent.buffer import Position, SourceBuffer, split_lines
from bffkit.indent.indenter import BffIndenter
from bffkit.log import get_logger, init_logging
from bffkit.version import show_version

EXIT_ISSUES = 1
"""Exit status when `--check` finds lines to reindent."""

EXIT_USAGE = 2
"""Exit status for bad arguments or configuration."""


def read_source(path: Path, *, from_stdin: bool) -> str:
    """Read the source text from `path`, or from stdin when `from_stdin` is set."""
    if from_stdin:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def print_completions(buffer: SourceBuffer, position: Position, console: Console) -> None:
    """Print completion candidates at a position as a table."""
    context = completion_context(buffer, position)
    table = Table(show_header=False, show_edge=False, box=None)
    table.add_column("Name", style="green")
    table.add_column("Kind", style="dim")
    for candidate in candidates(context):
        table.add_row(candidate.text, candidate.meta)
    console.print(table)


def fail(console: Console, message: str) -> NoReturn:
    """Print an error and exit with the usage status."""
    console.print(f"[red]error:[/red] {escape(message)}")
    sys.exit(EXIT_USAGE)


def run(args: Args) -> None:  # noqa: C901
    """Run the requested operation on the given file."""
    if args.version:
        show_version()

    init_logging(args)
    logger = get_logger(__name__)
    console = Console(stderr=True)

    if args.file is None:
        fail(console, "a BFF file (or '-' for stdin) is required")

    try:
        settings = load_settings(args)
        cursor = args.cursor
    except (ConfigurationError, ValueError) as e:
        fail(console, str(e))

    try:
        text = read_source(args.file, from_stdin=args.reads_stdin)
    except (OSError, UnicodeDecodeError) as e:
        fail(console, f"cannot read {args.file}: {e}")

    indenter = BffIndenter(settings)
    buffer = SourceBuffer.from_text(text)
    label = "<stdin>" if args.reads_stdin else str(args.file)
    logger.info("Processing %s (%d lines) with %s", label, len(buffer), settings)

    if args.line is not None:
        try:
            indent = indenter.indent_for(buffer, args.line - 1)
        except IndexError as e:
            fail(console, str(e))
        print(indent)  # noqa: T201
        return

    if cursor is not None:
        line, column = cursor
        if not 0 <= line < len(buffer):
            fail(console, f"line {line + 1} is out of range")
        print_completions(buffer, Position(line, column), Console())
        return

    if args.check:
        issues = find_indent_issues(split_lines(text), indenter)
        render_issues(issues, console, label)
        sys.exit(EXIT_ISSUES if issues else 0)

    reindented = indenter.reindent_text(text)
    if args.write and not args.reads_stdin:
        if reindented != text:
            args.file.write_text(reindented, encoding="utf-8")
            logger.info("Rewrote %s", label)
        return
    sys.stdout.write(reindented)


def main() -> None:
    """Entry point for the CLI."""
    bind_and_run(run)


if __name__ == "__main__":
    main()
