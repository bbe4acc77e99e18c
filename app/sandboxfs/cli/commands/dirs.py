"""Directory commands.

Provides commands to create, copy, move, rename, delete and count
directories. Copies and moves are shallow: only the immediate children of
the source are transferred, and resource-fork artifacts ("._*") are skipped.
"""

from pathlib import Path
from typing import Annotated

import typer

from sandboxfs.cli.types import IgnoreTypeOption, finish, open_manager, type_check_for
from sandboxfs.utils.formatting import console, print_info

app = typer.Typer(
    help="Create, copy, move, rename, delete and count directories.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def create(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to create (parents included).")],
) -> None:
    """Create a directory. Succeeds if it already exists."""
    manager = open_manager(ctx)
    finish(manager.create_directory(path), f"Directory ready: {path}")


@app.command()
def subdir(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Name of the new subdirectory.")],
    parent: Annotated[Path, typer.Argument(help="Existing parent directory.")],
) -> None:
    """Create a subdirectory inside an existing directory."""
    manager = open_manager(ctx)
    finish(manager.create_subdirectory(name, parent), f"Subdirectory ready: {name}")


@app.command()
def copy(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Directory whose contents are copied.")],
    destination: Annotated[Path, typer.Argument(help="Directory receiving the contents.")],
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Copy the contents of a directory into another."""
    manager = open_manager(ctx)
    ok = manager.copy_directory(source, destination, type_check_for(ignore_type))
    finish(ok, f"Copied contents of {source} to {destination}")


@app.command()
def move(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Directory whose contents are moved.")],
    destination: Annotated[Path, typer.Argument(help="Directory receiving the contents.")],
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Move the contents of a directory into another."""
    manager = open_manager(ctx)
    ok = manager.move_directory(source, destination, type_check_for(ignore_type))
    finish(ok, f"Moved contents of {source} to {destination}")


@app.command()
def rename(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to rename.")],
    new_name: Annotated[str, typer.Argument(help="New name (same parent directory).")],
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Rename a directory within its parent."""
    manager = open_manager(ctx)
    ok = manager.rename_directory(path, new_name, type_check_for(ignore_type))
    finish(ok, f"Renamed {path} to {new_name}")


@app.command()
def delete(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to delete.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    ignore_type: IgnoreTypeOption = False,
) -> None:
    """Delete a directory and everything under it."""
    if not yes:
        confirmed = typer.confirm(f"Delete {path} and all of its contents?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    manager = open_manager(ctx)
    finish(manager.delete_directory(path, type_check_for(ignore_type)), f"Deleted {path}")


@app.command()
def count(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to count.")],
) -> None:
    """Print the number of entries directly inside a directory."""
    manager = open_manager(ctx)
    total = manager.number_of_files(path)
    if manager.last_failure is not None:
        raise typer.Exit(code=1)
    console.print(str(total), highlight=False)
