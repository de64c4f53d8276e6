"""Config commands.

Shows the effective user configuration and writes a default config
file to the XDG config directory.
"""

from typing import Annotated

import tomli_w
import typer

from pathscout.cli.types import load_cli_config
from pathscout.core.config import ConfigError, PathscoutConfig, save_config
from pathscout.core.paths import get_config_path
from pathscout.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Show or create the pathscout configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = load_cli_config()
    path = get_config_path()

    if path.exists():
        print_info(f"Config file: {path}")
    else:
        print_info(f"No config file at {path}, showing defaults.")

    data = config.model_dump(mode="json", exclude_none=True)
    console.print(tomli_w.dumps(data), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file."""
    path = get_config_path()
    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(PathscoutConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
