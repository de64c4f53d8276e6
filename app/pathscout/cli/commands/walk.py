"""Walk command implementation.

Lists the entries of a directory tree as a table, JSON or plain paths.
Defaults come from the [walk] section of the user config; any flag
given on the command line replaces the configured value.
"""

import asyncio
import dataclasses
import json
from collections.abc import Callable
from contextlib import aclosing
from itertools import islice
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape

from pathscout.cli.types import OutputFormat, is_quiet, load_cli_config
from pathscout.errors import PathscoutError
from pathscout.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_error,
    print_info,
)
from pathscout.walker import WalkEntry, WalkOptions, build_patterns, walk, walk_sync


def walk_tree(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Directory to walk."),
    ] = Path("."),
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            "-d",
            min=0,
            help="Directory levels to descend below the root.",
        ),
    ] = None,
    files: Annotated[
        bool | None,
        typer.Option("--files/--no-files", help="Include file entries."),
    ] = None,
    dirs: Annotated[
        bool | None,
        typer.Option("--dirs/--no-dirs", help="Include directory entries."),
    ] = None,
    symlinks: Annotated[
        bool | None,
        typer.Option("--symlinks/--no-symlinks", help="Include unresolved symlink entries."),
    ] = None,
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            help="Resolve symlinks and descend into linked directories.",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="Glob pattern matched against full paths."),
    ] = None,
    exclude_regex: Annotated[
        list[str] | None,
        typer.Option("--exclude-regex", "-r", help="Regular expression searched in full paths."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            min=1,
            help="Stop after this many entries.",
        ),
    ] = None,
    use_async: Annotated[
        bool,
        typer.Option("--async", help="Use the asyncio implementation."),
    ] = False,
) -> None:
    """Walk a directory tree and list its entries."""
    config = load_cli_config()

    overrides: dict[str, Any] = {
        "max_depth": max_depth,
        "include_files": files,
        "include_dirs": dirs,
        "include_symlinks": symlinks,
        "follow_symlinks": follow_symlinks,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    # Plain output is printed as the walk goes; table and JSON need every entry first.
    entries: list[WalkEntry] = []
    handle = _echo_path if output_format == OutputFormat.PLAIN else entries.append

    try:
        if exclude is not None or exclude_regex is not None:
            overrides["exclude"] = build_patterns(exclude or (), exclude_regex or ())
        options = dataclasses.replace(config.walk.to_options(), **overrides)

        if use_async:
            asyncio.run(_drain_async(root, options, limit, handle))
        else:
            for entry in islice(walk_sync(root, options), limit):
                handle(entry)
    except (PathscoutError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.PLAIN:
        return

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([entry.to_dict() for entry in entries]))
        return

    if not entries:
        print_info("No entries found.")
        return

    table = create_entry_table(f"Walk of {escape(str(root))}")
    for entry in entries:
        table.add_row(*format_entry_row(entry))
    console.print(table)

    if not is_quiet(ctx):
        console.print(f"\n[dim]{len(entries)} entries[/dim]")
        if limit and len(entries) == limit:
            console.print(f"[dim](stopped after {limit} entries)[/dim]")


def _echo_path(entry: WalkEntry) -> None:
    typer.echo(entry.path)


async def _drain_async(
    root: Path,
    options: WalkOptions,
    limit: int | None,
    handle: Callable[[WalkEntry], None],
) -> None:
    """Pass up to limit entries from the asynchronous walker to handle."""
    count = 0
    async with aclosing(walk(root, options)) as stream:
        async for entry in stream:
            handle(entry)
            count += 1
            if limit is not None and count >= limit:
                break
