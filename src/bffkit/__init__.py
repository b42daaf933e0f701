"""Indentation and completion support for FASTBuild BFF files."""
