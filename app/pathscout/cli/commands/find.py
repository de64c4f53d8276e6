"""Find command implementation.

Searches the working directory and its parents for a named file and
prints the first match.
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from pathscout.cli.types import load_cli_config
from pathscout.errors import PathscoutError
from pathscout.search import find, find_sync
from pathscout.utils.formatting import print_error, print_warning


def find_file(
    names: Annotated[
        list[str],
        typer.Argument(help="File name(s) to look for, tried in order at each level."),
    ],
    cwd: Annotated[
        Path | None,
        typer.Option(
            "--cwd",
            "-C",
            help="Directory to start searching from (default: current directory).",
        ),
    ] = None,
    stop: Annotated[
        Path | None,
        typer.Option(
            "--stop",
            "-s",
            help="Exclusive upper boundary; this directory is never searched.",
        ),
    ] = None,
    use_async: Annotated[
        bool,
        typer.Option("--async", help="Use the asyncio implementation."),
    ] = False,
) -> None:
    """Find a file in a directory or any of its parents."""
    config = load_cli_config()
    boundary = stop or config.find.stop

    try:
        if use_async:
            result = asyncio.run(find(names, cwd=cwd, stop=boundary))
        else:
            result = find_sync(names, cwd=cwd, stop=boundary)
    except (PathscoutError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if result is None:
        print_warning(f"No match for {', '.join(names)}")
        raise typer.Exit(code=1)

    typer.echo(result)
