"""Find commands.

Locate a file by name across the documents, resources, library and temp
roots (searched in that order) and optionally act on the first match.
"""

from pathlib import Path
from typing import Annotated

import typer

from sandboxfs.cli.types import finish, open_manager
from sandboxfs.utils.formatting import console, print_info

app = typer.Typer(
    help="Find a file by name across the storage roots.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("path")
def find_path(
    ctx: typer.Context,
    filename: Annotated[str, typer.Argument(help="Exact file name to look for.")],
) -> None:
    """Print the path of the first file named FILENAME."""
    manager = open_manager(ctx)
    result = manager.find_path(filename)
    if result is None:
        raise typer.Exit(code=1)
    console.print(result, highlight=False, soft_wrap=True)


@app.command()
def copy(
    ctx: typer.Context,
    filename: Annotated[str, typer.Argument(help="Exact file name to look for.")],
    destination: Annotated[Path, typer.Argument(help="Directory receiving the copy.")],
) -> None:
    """Find a file by name and copy it into a directory."""
    manager = open_manager(ctx)
    finish(manager.find_and_copy_file(filename, destination), f"Copied {filename} to {destination}")


@app.command()
def move(
    ctx: typer.Context,
    filename: Annotated[str, typer.Argument(help="Exact file name to look for.")],
    destination: Annotated[Path, typer.Argument(help="Directory receiving the file.")],
) -> None:
    """Find a file by name and move it into a directory."""
    manager = open_manager(ctx)
    finish(manager.find_and_move_file(filename, destination), f"Moved {filename} to {destination}")


@app.command()
def delete(
    ctx: typer.Context,
    filename: Annotated[str, typer.Argument(help="Exact file name to look for.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Find a file by name and delete it."""
    if not yes:
        confirmed = typer.confirm(f"Delete the first file named {filename}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    manager = open_manager(ctx)
    finish(manager.find_and_delete_file(filename), f"Deleted {filename}")
