"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from pathscout.walker.models import WalkEntry

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "entry.directory": "bold #0e8ac8",
        "entry.file": "#ffffff",
        "entry.symlink": "italic #d44ebc",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def entry_kind(entry: WalkEntry) -> str:
    """Return a short type label for a walk entry."""
    if entry.is_symlink:
        return "symlink"
    if entry.is_directory:
        return "directory"
    if entry.is_file:
        return "file"
    return "other"


def create_entry_table(title: str) -> Table:
    """Create a pre-configured table for displaying walk entries.

    Args:
        title: Table title.

    Returns:
        Rich Table with Type, Name and Path columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Type", width=10)
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", style="muted", overflow="fold")
    return table


def format_entry_row(entry: WalkEntry) -> tuple[str, str, str]:
    """Format a walk entry as a table row with kind-specific styling.

    Names and paths are escaped so brackets in them are not read as markup.
    """
    kind = entry_kind(entry)
    style = f"entry.{kind}" if kind != "other" else "muted"
    return (f"[{style}]{kind}[/]", f"[{style}]{escape(entry.name)}[/]", escape(entry.path))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
