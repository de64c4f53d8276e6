"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from pathscout import __version__
from pathscout.cli.commands import config, find, walk
from pathscout.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="pathscout",
    help="Find files in parent directories and walk directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathscout version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route pathscout log records to stderr through Rich when verbose."""
    if not verbose:
        return
    package_logger = logging.getLogger("pathscout")
    package_logger.setLevel(logging.DEBUG)
    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """pathscout - find files upward, walk directory trees downward."""
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose)


# Register commands
app.command(name="find")(find.find_file)
app.command(name="walk")(walk.walk_tree)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
