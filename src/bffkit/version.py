"""Installed package version."""

import sys
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "bffkit"
"""Distribution name the version is looked up under."""


def installed_version() -> str | None:
    """Get the installed bffkit version, or None when running from a source tree."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return None


def show_version() -> None:
    """Print `bffkit <version>` and exit with status 0."""
    print(f"{DISTRIBUTION} {installed_version() or '(version unknown)'}")  # noqa: T201
    sys.exit(0)
