"""Tests for the static BFF vocabulary."""

import pytest

from bffkit.language.keywords import (
    ALL_PROPERTIES,
    FUNCTION_PROPERTIES,
    FUNCTIONS,
    properties_for,
)


class TestProperties:
    """Property lookup per function."""

    def test_known_function(self):
        """A function with a fixed body gets its own properties."""
        assert properties_for("Alias") == ("Hidden", "Targets")

    @pytest.mark.parametrize("function", [None, "ForEach", "NotAFunction"])
    def test_unknown_or_free_form_function(self, function):
        """Free-form bodies and top level offer every property."""
        assert properties_for(function) == ALL_PROPERTIES

    def test_all_properties_sorted_and_unique(self):
        """The combined list has no duplicates."""
        assert list(ALL_PROPERTIES) == sorted(set(ALL_PROPERTIES))

    def test_every_keyed_function_exists(self):
        """Only real functions have property lists."""
        assert set(FUNCTION_PROPERTIES) <= set(FUNCTIONS)

    def test_table_is_read_only(self):
        """The table cannot be changed by callers."""
        with pytest.raises(TypeError):
            FUNCTION_PROPERTIES["Alias"] = ()  # type: ignore[index]
