"""CLI package for pathscout.

This package contains the Typer application and all subcommands.
"""

from pathscout.cli.main import app

__all__ = ["app"]
