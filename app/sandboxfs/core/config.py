"""Storage configuration and settings.

This module provides the configuration model and I/O functions for
sandboxfs. The configuration decides which application's storage is
managed, optionally pins each of the four roots to an explicit directory,
and sets the initial debug mode.

Configuration is stored in ~/.config/sandboxfs/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sandboxfs.core.paths import APP_NAME, get_config_path

logger = logging.getLogger(__name__)

# Keys holding optional root overrides, in TOML output order
ROOT_KEYS: tuple[str, ...] = ("documents_dir", "resources_dir", "library_dir", "temp_dir")


class StorageConfig(BaseModel):
    """Configuration for a StorageManager.

    Attributes:
        app_name: Application whose private storage is managed.
        documents_dir: Explicit documents root. If None, uses the XDG default.
        resources_dir: Explicit resources root. If None, uses the bundled resources.
        library_dir: Explicit library root. If None, uses the XDG default.
        temp_dir: Explicit temp root. If None, uses the system temp directory.
        debug: Initial debug mode (emit informational messages).
    """

    model_config = ConfigDict(extra="forbid")

    app_name: Annotated[
        str,
        Field(min_length=1, pattern=r"^[A-Za-z0-9._-]+$", description="Application name"),
    ] = APP_NAME
    documents_dir: Annotated[
        Path | None,
        Field(description="Documents root (None = XDG data default)"),
    ] = None
    resources_dir: Annotated[
        Path | None,
        Field(description="Resources root (None = bundled resources)"),
    ] = None
    library_dir: Annotated[
        Path | None,
        Field(description="Library root (None = XDG data default)"),
    ] = None
    temp_dir: Annotated[
        Path | None,
        Field(description="Temp root (None = system temp directory)"),
    ] = None
    debug: Annotated[
        bool,
        Field(description="Emit informational messages"),
    ] = False

    @field_validator(*ROOT_KEYS, mode="after")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        """Expand a leading ~ in root overrides."""
        if v is None:
            return None
        return v.expanduser()


class StorageConfigError(Exception):
    """Base exception for storage configuration errors."""


class StorageConfigNotFoundError(StorageConfigError):
    """Raised when the config file is not found."""


class StorageConfigParseError(StorageConfigError):
    """Raised when the config file cannot be parsed."""


def load_storage_config(path: Path | None = None) -> StorageConfig:
    """Load storage configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated StorageConfig object.

    Raises:
        StorageConfigNotFoundError: If the config file doesn't exist.
        StorageConfigParseError: If the TOML syntax is invalid.
        StorageConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise StorageConfigNotFoundError(f"Storage config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise StorageConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise StorageConfigError(f"Failed to read storage config: {e}") from e

    try:
        return StorageConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise StorageConfigError(f"Invalid storage config content: {e}") from e


def load_storage_config_or_default(path: Path | None = None) -> StorageConfig:
    """Load storage configuration, falling back to defaults if absent.

    Only a missing file falls back; a file that exists but is invalid
    still raises.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        The loaded config, or the default config if no file exists.

    Raises:
        StorageConfigParseError: If the TOML syntax is invalid.
        StorageConfigError: If the content doesn't match the schema.
    """
    try:
        return load_storage_config(path)
    except StorageConfigNotFoundError:
        logger.debug("No storage config found, using defaults")
        return get_default_config()


def save_storage_config(config: StorageConfig, path: Path | None = None) -> Path:
    """Save storage configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The StorageConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        StorageConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise StorageConfigError(f"Failed to write storage config: {e}") from e

    return config_path


def _config_to_dict(config: StorageConfig) -> dict[str, object]:
    """Convert StorageConfig to a dictionary for TOML serialization.

    Only includes root overrides that are set, since TOML has no null.

    Args:
        config: The StorageConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {"app_name": config.app_name}

    for key in ROOT_KEYS:
        value = getattr(config, key)
        if value is not None:
            result[key] = str(value)

    result["debug"] = config.debug
    return result


def get_default_config() -> StorageConfig:
    """Create a default StorageConfig.

    Returns:
        StorageConfig with default settings.
    """
    return StorageConfig()
