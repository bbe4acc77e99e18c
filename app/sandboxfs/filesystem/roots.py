"""Resolution of the four storage roots.

Roots are computed once when a storage component is constructed and are
read-only afterwards. They are not created here; operations that need a
root to exist create it on first use.
"""

import logging
from pathlib import Path

from sandboxfs.core.config import StorageConfig
from sandboxfs.core.paths import (
    get_bundled_resources_dir,
    get_documents_dir,
    get_library_dir,
    get_temp_dir,
)
from sandboxfs.filesystem.classifier import classify
from sandboxfs.filesystem.models import EntryKind, RootSet

logger = logging.getLogger(__name__)


class RootResolutionError(Exception):
    """Raised when a storage root cannot be resolved.

    This is the only unrecoverable failure of a storage component: an
    instance without its roots is unusable.
    """


def resolve_roots(config: StorageConfig | None = None) -> RootSet:
    """Resolve the documents, resources, library and temp roots.

    Explicit directories in the config take precedence over the XDG and
    package defaults.

    Args:
        config: Storage configuration. If None, uses the defaults.

    Returns:
        Immutable RootSet with four absolute, distinct paths.

    Raises:
        RootResolutionError: If any root cannot be resolved.
    """
    config = config or StorageConfig()
    app_name = config.app_name

    try:
        documents = _override(config, "documents_dir") or get_documents_dir(app_name)
        library = _override(config, "library_dir") or get_library_dir(app_name)
        temp = _override(config, "temp_dir") or get_temp_dir(app_name)
    except (OSError, RuntimeError) as e:
        # Path.home() raises RuntimeError without a home directory,
        # tempfile.gettempdir() raises FileNotFoundError without a temp dir
        raise RootResolutionError(f"Cannot resolve storage roots: {e}") from e

    try:
        resources = _override(config, "resources_dir") or get_bundled_resources_dir()
    except (ModuleNotFoundError, TypeError) as e:
        raise RootResolutionError(f"Cannot resolve resources root: {e}") from e

    # Resources is read-only and never created, so it must already exist
    if classify(resources) is not EntryKind.DIRECTORY:
        raise RootResolutionError(f"Resources root is not a directory: {resources}")

    try:
        roots = RootSet(
            documents=_absolute(documents),
            resources=_absolute(resources),
            library=_absolute(library),
            temp=_absolute(temp),
        )
    except (OSError, ValueError) as e:
        raise RootResolutionError(f"Invalid storage roots: {e}") from e

    logger.debug("Resolved storage roots: %s", roots.as_dict())
    return roots


def _override(config: StorageConfig, key: str) -> Path | None:
    """Return a root override from the config, or None if it is not set.

    Raises:
        RootResolutionError: If the override is empty or relative.
    """
    value: Path | None = getattr(config, key)
    if value is None:
        return None
    # An empty TOML string arrives as Path("."), which is relative too
    if not value.is_absolute():
        msg = f"Root override '{key}' must be an absolute path, got '{value}'"
        raise RootResolutionError(msg)
    return value


def _absolute(path: Path) -> str:
    """Make a path absolute without following symlinks."""
    return str(path.absolute())
