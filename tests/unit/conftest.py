"""Shared fixtures for bffkit unit tests."""

from unittest.mock import Mock

import pytest

from bffkit.args import Args
from bffkit.indent.indenter import BffIndenter
from bffkit.indent.settings import IndentSettings

WELL_FORMED = """\
; Build configuration
#include "config.bff"

.Compiler = 'cl.exe'
.BaseOptions = '/nologo'
             + ' /W4'
             + ' /O2'

Settings
{
    .CachePath = 'C:/cache'
    .Workers = { 'build01',
                 'build02' }
}

Library('Core')
{
    .CompilerOptions = .BaseOptions
                     + ' /c "%1" /Fo"%2"'
    .CompilerInputPath = 'Core/'
    #if __WINDOWS__
        .LibrarianOptions = '/OUT:"%2" "%1"'
    #else
        .LibrarianOptions = 'rcs "%2" "%1"'
    #endif
    .CompilerOutputPath = 'out/Core/'
    .Configs = {
        [
            .Name = 'Debug'
        ]
        [
            .Name = 'Release'
        ]
    }
}

Alias('all') { .Targets = { 'Core' } }
"""
"""A file every line of which is already indented the way bffkit indents it."""


@pytest.fixture
def indenter() -> BffIndenter:
    """Provide an indenter with default settings (4 columns per level)."""
    return BffIndenter(IndentSettings())


@pytest.fixture
def well_formed_lines() -> list[str]:
    """Provide the lines of a consistently indented BFF file."""
    return WELL_FORMED.splitlines()


@pytest.fixture
def mock_args(tmp_path) -> Mock:
    """Create mock CLI args with every option at its default."""
    args = Mock(spec=Args)
    args.file = None
    args.path = None
    args.line = None
    args.complete = None
    args.check = False
    args.write = False
    args.indent_unit = None
    args.tab_width = None
    args.use_tabs = False
    args.verbose = False
    args.version = False
    args.reads_stdin = False
    args.working_dir = tmp_path
    args.cursor = None
    return args
