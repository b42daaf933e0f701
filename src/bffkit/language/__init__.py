"""BFF language vocabulary.

Static tables of functions, directives, keywords, built-in variables and
per-function properties.
"""

from bffkit.language.keywords import (
    ALL_PROPERTIES,
    BUILTIN_VARIABLES,
    DIRECTIVES,
    FUNCTION_PROPERTIES,
    FUNCTIONS,
    KEYWORDS,
    properties_for,
)

__all__ = [
    "ALL_PROPERTIES",
    "BUILTIN_VARIABLES",
    "DIRECTIVES",
    "FUNCTIONS",
    "FUNCTION_PROPERTIES",
    "KEYWORDS",
    "properties_for",
]
