"""Tests for the --version output."""

from importlib.metadata import PackageNotFoundError

import pytest

from bffkit import version as version_module
from bffkit.version import installed_version, show_version


class TestShowVersion:
    """Printing the installed version."""

    def test_installed(self, monkeypatch, capsys):
        """The installed distribution's version is printed."""
        monkeypatch.setattr(version_module, "version", lambda _name: "0.4.2")
        with pytest.raises(SystemExit) as exc_info:
            show_version()
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == "bffkit 0.4.2\n"

    def test_not_installed(self, monkeypatch, capsys):
        """A source checkout without package metadata still reports something."""

        def missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(version_module, "version", missing)
        assert installed_version() is None
        with pytest.raises(SystemExit):
            show_version()
        assert capsys.readouterr().out == "bffkit (version unknown)\n"
