"""CLI commands for sandboxfs.

This package contains all subcommand implementations.
"""

from sandboxfs.cli.commands import config, dirs, files, find, roots

__all__ = ["config", "dirs", "files", "find", "roots"]
