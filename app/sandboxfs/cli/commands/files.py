"""File commands.

Provides commands to copy, move, delete and read single files, and to
build the path of a file inside a directory.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from sandboxfs.cli.types import IgnoreTypeOption, finish, open_manager, type_check_for
from sandboxfs.utils.formatting import console, print_info

app = typer.Typer(
    help="Copy, move, delete and read files.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def copy(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to copy.")],
    destination: Annotated[Path, typer.Argument(help="Directory receiving the copy.")],
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Copy a file into a directory, keeping its name."""
    manager = open_manager(ctx)
    ok = manager.copy_file(path, destination, type_check_for(ignore_type))
    finish(ok, f"Copied {path.name} to {destination}")


@app.command()
def move(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to move.")],
    destination: Annotated[Path, typer.Argument(help="Directory receiving the file.")],
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Move a file into a directory, keeping its name."""
    manager = open_manager(ctx)
    ok = manager.move_file(path, destination, type_check_for(ignore_type))
    finish(ok, f"Moved {path.name} to {destination}")


@app.command()
def delete(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to delete.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Delete a single file."""
    if not yes:
        confirmed = typer.confirm(f"Delete {path}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    manager = open_manager(ctx)
    finish(manager.delete_file(path, type_check_for(ignore_type)), f"Deleted {path}")


@app.command()
def cat(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to read.")],
) -> None:
    """Write the raw contents of a file to stdout."""
    manager = open_manager(ctx)
    data = manager.retrieve_data(path)
    if data is None:
        raise typer.Exit(code=1)
    sys.stdout.buffer.write(data)
    sys.stdout.flush()


@app.command("path")
def path_for(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="File name.")],
    directory: Annotated[Path, typer.Argument(help="Existing directory.")],
) -> None:
    """Print the path a file named NAME would have inside DIRECTORY."""
    manager = open_manager(ctx)
    result = manager.get_path_for_file(name, directory)
    if result is None:
        raise typer.Exit(code=1)
    console.print(result, highlight=False, soft_wrap=True)
