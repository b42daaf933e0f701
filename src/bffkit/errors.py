"""Error types raised by bffkit.

Text-structure problems (unmatched brackets, dangling continuations) are never
raised; the indenter degrades to a safe default instead. Only setup and API
contract violations surface as exceptions.
"""


class BffkitError(Exception):
    """Base class for all bffkit errors."""


class ConfigurationError(BffkitError, ValueError):
    """Invalid indentation or completion settings.

    Raised when settings are built, never during an indent query.
    """

    def __init__(self, message: str, *, field: str | None = None, value: object = None) -> None:
        """Initialize the ConfigurationError.

        Args:
            message: Human-readable description of the problem.
            field: Name of the offending setting, if known.
            value: The rejected value, if known.

        """
        super().__init__(message)
        self.field = field
        """Name of the offending setting."""

        self.value = value
        """The rejected value."""
