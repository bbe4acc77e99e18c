"""CLI package for sandboxfs.

This package contains the Typer application and all subcommands.
"""

from sandboxfs.cli.main import app

__all__ = ["app"]
