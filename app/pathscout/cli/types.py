"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from pathscout.core.config import ConfigError, PathscoutConfig, load_config_or_default
from pathscout.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


def load_cli_config() -> PathscoutConfig:
    """Load the user configuration for a CLI command.

    A missing config file yields the defaults. A broken one is reported
    and ends the command with exit code 1.

    Returns:
        The effective PathscoutConfig.

    Raises:
        typer.Exit: If the config file cannot be parsed or validated.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether the global --quiet flag was given."""
    obj = ctx.find_root().obj
    return bool(obj and obj.get("quiet"))
