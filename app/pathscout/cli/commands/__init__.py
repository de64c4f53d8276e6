"""CLI commands for pathscout.

This package contains all subcommand implementations.
"""

from pathscout.cli.commands import config, find, walk

__all__ = ["config", "find", "walk"]
