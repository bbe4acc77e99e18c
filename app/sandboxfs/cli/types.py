"""Shared types and utilities for CLI commands.

This module provides common options and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from sandboxfs.core.config import StorageConfigError, load_storage_config_or_default
from sandboxfs.filesystem.manager import StorageManager
from sandboxfs.filesystem.models import TypeCheck
from sandboxfs.filesystem.roots import RootResolutionError
from sandboxfs.utils.formatting import print_error, print_success


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


# Reusable option for commands that apply a kind guard
IgnoreTypeOption = Annotated[
    bool,
    typer.Option(
        "--ignore-type",
        help="Act even if the path's kind (file/directory) does not match.",
    ),
]


def type_check_for(ignore_type: bool) -> TypeCheck:
    """Map the --ignore-type flag to a kind-guard policy."""
    return TypeCheck.IGNORE if ignore_type else TypeCheck.ENFORCE


def get_config_path(ctx: typer.Context) -> Path | None:
    """Return the --config path given to the main command, if any."""
    obj = ctx.ensure_object(dict)
    path = obj.get("config_path")
    return path if isinstance(path, Path) else None


def open_manager(ctx: typer.Context) -> StorageManager:
    """Build a StorageManager from the global CLI options.

    Args:
        ctx: Typer context carrying the main command's options.

    Returns:
        A ready StorageManager.

    Raises:
        typer.Exit: If the config is invalid or the roots cannot be resolved.
    """
    obj = ctx.ensure_object(dict)

    try:
        config = load_storage_config_or_default(get_config_path(ctx))
    except StorageConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if obj.get("debug"):
        config = config.model_copy(update={"debug": True})
    if config.debug:
        logging.getLogger("sandboxfs").setLevel(logging.INFO)

    try:
        return StorageManager(config)
    except RootResolutionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def finish(ok: bool, message: str) -> None:
    """Report the outcome of an operation.

    Failures have already been logged by the manager, so only the exit
    code is set for them.

    Args:
        ok: Result returned by the operation.
        message: Success message to print.

    Raises:
        typer.Exit: With code 1 if the operation failed.
    """
    if not ok:
        raise typer.Exit(code=1)
    print_success(message)
