"""Parse and organize app args."""

from collections.abc import Callable
from pathlib import Path

import typed_argparse as tap

STDIN_MARKER = "-"
"""File argument that reads the source from stdin."""


class Args(tap.TypedArgs):
    """App args."""

    file: Path | None = tap.arg(
        positional=True,
        nargs="?",
        help="BFF file to process, '-' to read stdin",
        default=None,
    )
    path: Path | None = tap.arg(
        help="Working directory to look for .bffkit/config.toml in",
        default=None,
    )
    line: int | None = tap.arg(
        help="Print the computed indent of this line (1-indexed) and exit",
        default=None,
    )
    complete: str | None = tap.arg(
        help="Print completions at LINE:COLUMN (1-indexed line, 0-indexed column)",
        default=None,
    )
    check: bool = tap.arg(
        help="Report lines whose indent would change; exit 1 if there are any",
        default=False,
    )
    write: bool = tap.arg(help="Reindent the file in place", default=False)
    indent_unit: int | None = tap.arg(help="Columns per nesting level", default=None)
    tab_width: int | None = tap.arg(help="Columns per tab stop", default=None)
    use_tabs: bool = tap.arg(help="Indent with tabs when reindenting", default=False)
    verbose: bool = tap.arg(help="Enables verbose (DEBUG) logging", default=False)
    version: bool = tap.arg(help="Show version and exit", default=False)

    @property
    def reads_stdin(self) -> bool:
        """Check if the source comes from stdin."""
        return self.file is not None and str(self.file) == STDIN_MARKER

    @property
    def working_dir(self) -> Path:
        """Get working directory."""
        if self.path:
            work_dir = self.path
            if not work_dir.is_absolute():
                work_dir = Path.cwd().joinpath(work_dir).resolve()
        else:
            work_dir = Path.cwd().resolve()

        if not work_dir.is_dir():
            msg = (
                f"Specified path '{self.path}' resolved to '{work_dir}' which is "
                "not a valid directory."
            )
            raise ValueError(
                msg,
            )

        return work_dir

    @property
    def cursor(self) -> tuple[int, int] | None:
        """Get the `--complete` position as 0-indexed (line, column).

        Raises:
            ValueError: If the value is not in LINE:COLUMN form.

        """
        if self.complete is None:
            return None
        line, sep, column = self.complete.partition(":")
        if not sep or not line.isdigit() or not column.isdigit() or int(line) < 1:
            msg = f"--complete expects LINE:COLUMN, got '{self.complete}'"
            raise ValueError(msg)
        return int(line) - 1, int(column)


def bind_and_run(app_main: Callable[[Args], None]) -> None:
    """Parse args and run the app passing the parsed args."""
    tap.Parser(Args).bind(app_main).run()
