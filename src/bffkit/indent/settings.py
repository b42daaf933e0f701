"""Indentation settings."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bffkit.errors import ConfigurationError

DEFAULT_INDENT_UNIT = 4
"""Columns per nesting level when nothing else is configured."""

DEFAULT_TAB_WIDTH = 4
"""Columns a tab advances to when nothing else is configured."""


class IndentSettings(BaseModel):
    """Settings an indenter is built with.

    Use `IndentSettings.create` to get a `ConfigurationError` instead of a
    pydantic `ValidationError` for bad values.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent_unit: int = Field(default=DEFAULT_INDENT_UNIT, strict=True)
    """Columns per nesting level."""

    tab_width: int = Field(default=DEFAULT_TAB_WIDTH, strict=True)
    """Columns a tab advances to when measuring and emitting indentation."""

    use_tabs: bool = Field(default=False, strict=True)
    """Emit tabs for whole tab stops when reindenting."""

    @field_validator("indent_unit", "tab_width")
    @classmethod
    def check_positive(cls, v: int) -> int:
        """Reject widths below one column."""
        if v < 1:
            msg = "must be a positive integer"
            raise ValueError(msg)
        return v

    @classmethod
    def create(cls, **values: Any) -> "IndentSettings":  # noqa: ANN401
        """Build settings, raising ConfigurationError on invalid values.

        Args:
            **values: Field values; unset fields keep their defaults.

        Returns:
            The validated settings.

        Raises:
            ConfigurationError: If any value is missing its type or range.

        """
        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            value = values.get(field) if field else None
            msg = f"invalid setting '{field}' = {value!r}: {error['msg']}"
            raise ConfigurationError(msg, field=field, value=value) from e

    def indent_string(self, width: int) -> str:
        """Render `width` columns of indentation."""
        if not self.use_tabs:
            return " " * width
        tabs, spaces = divmod(width, self.tab_width)
        return "\t" * tabs + " " * spaces
