"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from sandboxfs.core.config import StorageConfig, save_storage_config
from sandboxfs.filesystem.manager import StorageManager
from sandboxfs.filesystem.models import RootSet


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo logging configuration applied by CLI invocations."""
    yield
    package_logger = logging.getLogger("sandboxfs")
    package_logger.setLevel(logging.NOTSET)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)


@pytest.fixture
def storage_config(tmp_path: Path) -> StorageConfig:
    """Config whose four roots live under tmp_path/sandbox.

    Documents, library and temp are not created; resources is created
    and holds example.txt.
    """
    base = tmp_path / "sandbox"
    resources = base / "Resources"
    resources.mkdir(parents=True)
    (resources / "example.txt").write_bytes(b"example resource\n")
    return StorageConfig(
        app_name="testapp",
        documents_dir=base / "Documents",
        resources_dir=resources,
        library_dir=base / "Library",
        temp_dir=base / "tmp",
    )


@pytest.fixture
def config_file(storage_config: StorageConfig, tmp_path: Path) -> Path:
    """The sandbox config saved as TOML, for passing to --config."""
    return save_storage_config(storage_config, tmp_path / "config.toml")


@pytest.fixture
def manager(storage_config: StorageConfig) -> StorageManager:
    """StorageManager over the tmp_path sandbox."""
    return StorageManager(storage_config)


@pytest.fixture
def roots(manager: StorageManager) -> RootSet:
    """Roots of the sandbox manager."""
    return manager.roots


@pytest.fixture
def populated_dir(tmp_path: Path) -> Path:
    """A directory with files, a hidden file, a resource fork and a subdirectory."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_text("alpha")
    (src / "b.bin").write_bytes(b"\x00\x01\x02")
    (src / ".hidden").write_text("hidden")
    (src / "._a.txt").write_text("resource fork")
    nested = src / "nested"
    nested.mkdir()
    (nested / "inner.txt").write_text("inner")
    return src
