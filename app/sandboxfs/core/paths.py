"""XDG-compliant path management for sandboxfs.

This module provides the default locations of the storage roots and of the
sandboxfs configuration file, following the XDG Base Directory
Specification.

XDG defaults:
- Config: ~/.config/sandboxfs/
- Documents: ~/.local/share/<app>/Documents/
- Library: ~/.local/share/<app>/Library/
- Temp: <system temp dir>/<app>/
"""

import os
import tempfile
from importlib import resources
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "sandboxfs"

# Package whose bundled data directory serves as the resources root
RESOURCES_PACKAGE = "sandboxfs"
RESOURCES_SUBDIR = "resources"


def _get_xdg_dir(env_var: str, default_subdir: str, app_name: str = APP_NAME) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_DATA_HOME").
        default_subdir: Default subdirectory under home (e.g., ".local/share").
        app_name: Application directory name appended to the base.

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / app_name
    return Path.home() / default_subdir / app_name


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/sandboxfs/ (or XDG_CONFIG_HOME/sandboxfs/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/sandboxfs/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_data_dir(app_name: str = APP_NAME) -> Path:
    """Get the private data directory of an application.

    Args:
        app_name: Application whose storage is being resolved.

    Returns:
        Path to ~/.local/share/<app_name>/ (or XDG_DATA_HOME/<app_name>/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share", app_name)


def get_documents_dir(app_name: str = APP_NAME) -> Path:
    """Get the default documents root.

    Returns:
        Path to <data dir>/Documents.
    """
    return get_data_dir(app_name) / "Documents"


def get_library_dir(app_name: str = APP_NAME) -> Path:
    """Get the default library root.

    The library root holds application support data that is not
    user-facing, such as caches and preferences.

    Returns:
        Path to <data dir>/Library.
    """
    return get_data_dir(app_name) / "Library"


def get_temp_dir(app_name: str = APP_NAME) -> Path:
    """Get the default temp root.

    Returns:
        Path to <system temp dir>/<app_name>.

    Raises:
        FileNotFoundError: If the system has no usable temporary directory.
    """
    return Path(tempfile.gettempdir()) / app_name


def get_bundled_resources_dir(package: str = RESOURCES_PACKAGE) -> Path:
    """Get the read-only resources directory shipped with a package.

    Args:
        package: Importable package that carries a ``resources`` data directory.

    Returns:
        Filesystem path of the package's resources directory.

    Raises:
        ModuleNotFoundError: If the package cannot be imported.
    """
    return Path(str(resources.files(package).joinpath(RESOURCES_SUBDIR)))
