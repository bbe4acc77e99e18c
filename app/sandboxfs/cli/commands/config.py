"""Configuration commands.

Show the effective storage configuration or write a default config file.
"""

from typing import Annotated

import typer

from sandboxfs.cli.types import get_config_path
from sandboxfs.core.config import (
    StorageConfigError,
    get_default_config,
    load_storage_config_or_default,
    save_storage_config,
)
from sandboxfs.core.paths import get_config_path as get_default_config_path
from sandboxfs.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or initialize the storage configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration as JSON."""
    try:
        config = load_storage_config_or_default(get_config_path(ctx))
    except StorageConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print_json(config.model_dump_json())


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file."""
    path = get_config_path(ctx) or get_default_config_path()

    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_storage_config(get_default_config(), path)
    except StorageConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
