"""Unit tests for directory CLI commands.

Tests for sandboxfs dir create, subdir, copy, move, rename, delete and count.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import Result
from sandboxfs.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

Invoke = Callable[..., Result]


@pytest.fixture
def invoke(config_file: Path) -> Invoke:
    """Invoke the CLI against the sandbox config."""

    def _invoke(*args: str, input: str | None = None) -> Result:
        return runner.invoke(app, ["--config", str(config_file), "dir", *args], input=input)

    return _invoke


class TestDirCreate:
    """Tests for sandboxfs dir create and subdir."""

    def test_create(self, invoke: Invoke, tmp_path: Path) -> None:
        """create makes the directory and its parents."""
        target = tmp_path / "a" / "b"

        result = invoke("create", str(target))

        assert result.exit_code == 0
        assert target.is_dir()
        assert "Directory ready" in result.output

    def test_create_over_file(self, invoke: Invoke, tmp_path: Path) -> None:
        """create fails with exit 1 when a file is in the way."""
        target = tmp_path / "file.txt"
        target.write_text("x")

        result = invoke("create", str(target))

        assert result.exit_code == 1
        assert target.is_file()

    def test_subdir_leading_slash(self, invoke: Invoke, tmp_path: Path) -> None:
        """subdir ignores a leading slash in the name."""
        result = invoke("subdir", "/Sub", str(tmp_path))

        assert result.exit_code == 0
        assert (tmp_path / "Sub").is_dir()

    def test_subdir_missing_parent(self, invoke: Invoke, tmp_path: Path) -> None:
        """subdir fails if the parent does not exist."""
        result = invoke("subdir", "Sub", str(tmp_path / "missing"))

        assert result.exit_code == 1
        assert not (tmp_path / "missing").exists()


class TestDirTransfer:
    """Tests for sandboxfs dir copy, move and rename."""

    def test_copy(self, invoke: Invoke, populated_dir: Path, tmp_path: Path) -> None:
        """copy transfers the children, skipping resource forks."""
        dst = tmp_path / "dst"

        result = invoke("copy", str(populated_dir), str(dst))

        assert result.exit_code == 0
        assert (dst / "a.txt").exists()
        assert not (dst / "._a.txt").exists()
        assert (populated_dir / "a.txt").exists()

    def test_copy_file_source(self, invoke: Invoke, tmp_path: Path) -> None:
        """copy refuses a file source unless --ignore-type is given."""
        src = tmp_path / "file.txt"
        src.write_text("x")
        dst = tmp_path / "dst"

        assert invoke("copy", str(src), str(dst)).exit_code == 1
        assert not dst.exists()

        assert invoke("copy", "--ignore-type", str(src), str(dst)).exit_code == 0
        assert (dst / "file.txt").exists()

    def test_move(self, invoke: Invoke, populated_dir: Path, tmp_path: Path) -> None:
        """move leaves only skipped entries in the source."""
        dst = tmp_path / "dst"

        result = invoke("move", str(populated_dir), str(dst))

        assert result.exit_code == 0
        assert (dst / "nested" / "inner.txt").exists()
        assert [p.name for p in populated_dir.iterdir()] == ["._a.txt"]

    def test_rename(self, invoke: Invoke, populated_dir: Path, tmp_path: Path) -> None:
        """rename replaces the directory with a sibling of the new name."""
        result = invoke("rename", str(populated_dir), "renamed")

        assert result.exit_code == 0
        assert not populated_dir.exists()
        assert (tmp_path / "renamed" / "a.txt").read_text() == "alpha"


class TestDirDelete:
    """Tests for sandboxfs dir delete."""

    def test_delete_with_yes(self, invoke: Invoke, populated_dir: Path) -> None:
        """--yes skips the prompt."""
        result = invoke("delete", "--yes", str(populated_dir))

        assert result.exit_code == 0
        assert not populated_dir.exists()

    def test_delete_confirmed(self, invoke: Invoke, populated_dir: Path) -> None:
        """Answering yes deletes the directory."""
        result = invoke("delete", str(populated_dir), input="y\n")

        assert result.exit_code == 0
        assert not populated_dir.exists()

    def test_delete_aborted(self, invoke: Invoke, populated_dir: Path) -> None:
        """Answering no keeps the directory."""
        result = invoke("delete", str(populated_dir), input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.output
        assert populated_dir.exists()

    def test_delete_missing(self, invoke: Invoke, tmp_path: Path) -> None:
        """Deleting a missing directory exits 1."""
        result = invoke("delete", "-y", str(tmp_path / "missing"))

        assert result.exit_code == 1
        assert "not_found" in result.output


class TestDirCount:
    """Tests for sandboxfs dir count."""

    def test_count(self, invoke: Invoke, populated_dir: Path) -> None:
        """count prints the number of immediate children."""
        result = invoke("count", str(populated_dir))

        assert result.exit_code == 0
        assert result.stdout.strip() == "5"

    def test_count_empty(self, invoke: Invoke, tmp_path: Path) -> None:
        """An empty directory counts as 0 with exit 0."""
        empty = tmp_path / "empty"
        empty.mkdir()

        result = invoke("count", str(empty))

        assert result.exit_code == 0
        assert result.stdout.strip() == "0"

    def test_count_missing(self, invoke: Invoke, tmp_path: Path) -> None:
        """A missing directory exits 1."""
        result = invoke("count", str(tmp_path / "missing"))

        assert result.exit_code == 1
