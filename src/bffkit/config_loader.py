"""Configuration loader for bffkit.

Indentation settings are merged from, lowest priority first:

1. built-in defaults,
2. the global `~/.bffkit/config.toml`,
3. the local `<working dir>/.bffkit/config.toml`,
4. command line arguments.

Settings live in an `[indent]` table:

    [indent]
    indent_unit = 2
    tab_width = 8
    use_tabs = false
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from bffkit.args import Args
from bffkit.errors import ConfigurationError
from bffkit.indent.settings import IndentSettings

logger = logging.getLogger(__name__)

CONFIG_DIR = ".bffkit"
"""Directory holding the config file, in the home or working directory."""

CONFIG_FILE = "config.toml"
"""Config file name."""

INDENT_TABLE = "indent"
"""TOML table holding indentation settings."""


def global_config_path() -> Path:
    """Get the path of the per-user config file."""
    return Path.home() / CONFIG_DIR / CONFIG_FILE


def local_config_path(working_dir: Path) -> Path:
    """Get the path of the per-project config file."""
    return working_dir / CONFIG_DIR / CONFIG_FILE


def read_indent_table(config_path: Path) -> dict[str, Any]:
    """Read the `[indent]` table of a config file.

    Args:
        config_path: The TOML file to read.

    Returns:
        The table's values, or an empty dict if the file is missing, cannot
        be read, or has no such table.

    Raises:
        ConfigurationError: If `indent` is present but is not a table.

    """
    if not config_path.exists():
        return {}
    try:
        with config_path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Failed to load config %s: %s", config_path, e)
        return {}

    table = config.get(INDENT_TABLE, {})
    if not isinstance(table, dict):
        msg = f"'{INDENT_TABLE}' in {config_path} must be a table"
        raise ConfigurationError(msg, field=INDENT_TABLE, value=table)
    logger.debug("Loaded indent settings from %s: %s", config_path, table)
    return table


def cli_overrides(args: Args) -> dict[str, Any]:
    """Collect settings given on the command line."""
    overrides: dict[str, Any] = {}
    if args.indent_unit is not None:
        overrides["indent_unit"] = args.indent_unit
    if args.tab_width is not None:
        overrides["tab_width"] = args.tab_width
    if args.use_tabs:
        overrides["use_tabs"] = True
    return overrides


def load_settings(args: Args) -> IndentSettings:
    """Load indentation settings with priority: CLI > local > global > defaults.

    Args:
        args: Parsed command line arguments

    Returns:
        The merged settings.

    Raises:
        ConfigurationError: If any source holds an invalid value.

    """
    values: dict[str, Any] = {}
    values.update(read_indent_table(global_config_path()))
    values.update(read_indent_table(local_config_path(args.working_dir)))
    values.update(cli_overrides(args))
    return IndentSettings.create(**values)
