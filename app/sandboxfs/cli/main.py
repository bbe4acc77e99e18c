"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from sandboxfs import __version__
from sandboxfs.cli.commands import config, dirs, files, find, roots
from sandboxfs.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="sandboxfs",
    help="File operations over an application's private storage roots.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sandboxfs version {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    """Route sandboxfs log records to stderr through Rich.

    Informational records are only produced in debug mode, so the level
    follows the same switch.
    """
    package_logger = logging.getLogger("sandboxfs")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
    package_logger.setLevel(logging.INFO if debug else logging.WARNING)


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
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Log every step, not only errors.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config.toml (default: ~/.config/sandboxfs/config.toml).",
        ),
    ] = None,
) -> None:
    """sandboxfs - file operations over private storage roots.

    Create, copy, move, rename, delete, find and read files and directories
    under the documents, resources, library and temp roots of an application.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path
    _configure_logging(debug)


# Register commands
app.add_typer(roots.app, name="roots")
app.add_typer(dirs.app, name="dir")
app.add_typer(files.app, name="file")
app.add_typer(find.app, name="find")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
