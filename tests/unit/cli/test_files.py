"""Unit tests for file CLI commands.

Tests for sandboxfs file copy, move, delete, cat and path.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import Result
from sandboxfs.cli.main import app
from sandboxfs.core.config import StorageConfig
from typer.testing import CliRunner

runner = CliRunner()

Invoke = Callable[..., Result]


@pytest.fixture
def invoke(config_file: Path) -> Invoke:
    """Invoke the CLI against the sandbox config."""

    def _invoke(*args: str, input: str | None = None) -> Result:
        return runner.invoke(app, ["--config", str(config_file), "file", *args], input=input)

    return _invoke


@pytest.fixture
def resource(storage_config: StorageConfig) -> Path:
    """The example file in the sandbox resources root."""
    assert storage_config.resources_dir is not None
    return storage_config.resources_dir / "example.txt"


class TestFileCopyMove:
    """Tests for sandboxfs file copy and move."""

    def test_copy_into_fresh_documents(
        self, invoke: Invoke, resource: Path, storage_config: StorageConfig
    ) -> None:
        """Copying a resource creates the documents root."""
        documents = storage_config.documents_dir
        assert documents is not None

        result = invoke("copy", str(resource), str(documents))

        assert result.exit_code == 0
        assert (documents / "example.txt").read_bytes() == resource.read_bytes()
        assert resource.exists()

    def test_copy_directory_refused(
        self, invoke: Invoke, populated_dir: Path, tmp_path: Path
    ) -> None:
        """A directory is not copied as a file."""
        result = invoke("copy", str(populated_dir), str(tmp_path / "dst"))

        assert result.exit_code == 1
        assert not (tmp_path / "dst").exists()

    def test_move(self, invoke: Invoke, tmp_path: Path) -> None:
        """move relocates the file."""
        src = tmp_path / "note.txt"
        src.write_text("note")

        result = invoke("move", str(src), str(tmp_path / "dst"))

        assert result.exit_code == 0
        assert not src.exists()
        assert (tmp_path / "dst" / "note.txt").read_text() == "note"


class TestFileDelete:
    """Tests for sandboxfs file delete."""

    def test_delete(self, invoke: Invoke, tmp_path: Path) -> None:
        """delete --yes removes the file."""
        target = tmp_path / "a.txt"
        target.write_text("a")

        result = invoke("delete", "--yes", str(target))

        assert result.exit_code == 0
        assert not target.exists()

    def test_delete_aborted(self, invoke: Invoke, tmp_path: Path) -> None:
        """Declining the prompt keeps the file."""
        target = tmp_path / "a.txt"
        target.write_text("a")

        result = invoke("delete", str(target), input="n\n")

        assert result.exit_code == 0
        assert target.exists()

    def test_delete_directory(self, invoke: Invoke, populated_dir: Path) -> None:
        """A directory needs --ignore-type."""
        assert invoke("delete", "-y", str(populated_dir)).exit_code == 1
        assert populated_dir.exists()

        assert invoke("delete", "-y", "--ignore-type", str(populated_dir)).exit_code == 0
        assert not populated_dir.exists()


class TestFileCat:
    """Tests for sandboxfs file cat."""

    def test_cat_bytes(self, invoke: Invoke, tmp_path: Path) -> None:
        """cat writes the raw bytes."""
        target = tmp_path / "data.bin"
        target.write_bytes(b"raw\x00bytes")

        result = invoke("cat", str(target))

        assert result.exit_code == 0
        assert result.stdout_bytes == b"raw\x00bytes"

    def test_cat_empty(self, invoke: Invoke, tmp_path: Path) -> None:
        """An empty file succeeds with no output."""
        target = tmp_path / "empty"
        target.touch()

        result = invoke("cat", str(target))

        assert result.exit_code == 0
        assert result.stdout_bytes == b""

    def test_cat_missing(self, invoke: Invoke, tmp_path: Path) -> None:
        """A missing file exits 1."""
        result = invoke("cat", str(tmp_path / "missing"))

        assert result.exit_code == 1


class TestFilePath:
    """Tests for sandboxfs file path."""

    def test_path(self, invoke: Invoke, tmp_path: Path) -> None:
        """path prints the joined path without requiring the file."""
        result = invoke("path", "/nope.txt", str(tmp_path))

        assert result.exit_code == 0
        assert result.stdout.strip() == str(tmp_path / "nope.txt")

    def test_path_bad_directory(self, invoke: Invoke, tmp_path: Path) -> None:
        """A missing directory exits 1."""
        result = invoke("path", "a.txt", str(tmp_path / "missing"))

        assert result.exit_code == 1
