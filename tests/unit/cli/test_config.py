"""Unit tests for config CLI commands."""

import json
import os
from pathlib import Path
from unittest.mock import patch

from sandboxfs.cli.main import app
from sandboxfs.core.config import StorageConfig, load_storage_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for sandboxfs config show."""

    def test_show_file(self, config_file: Path, storage_config: StorageConfig) -> None:
        """show prints the loaded config as JSON."""
        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["app_name"] == "testapp"
        assert data["documents_dir"] == str(storage_config.documents_dir)
        assert data["debug"] is False

    def test_show_defaults(self, tmp_path: Path) -> None:
        """Without a file the defaults are shown."""
        result = runner.invoke(
            app, ["--config", str(tmp_path / "missing.toml"), "config", "show"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["app_name"] == "sandboxfs"
        assert data["documents_dir"] is None


class TestConfigInit:
    """Tests for sandboxfs config init."""

    def test_init_writes_default(self, tmp_path: Path) -> None:
        """init writes a loadable default config."""
        path = tmp_path / "conf" / "config.toml"

        result = runner.invoke(app, ["--config", str(path), "config", "init"])

        assert result.exit_code == 0
        assert load_storage_config(path) == StorageConfig()

    def test_init_default_location(self, tmp_path: Path) -> None:
        """Without --config the XDG config path is used."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert (tmp_path / "sandboxfs" / "config.toml").exists()

    def test_init_refuses_overwrite(self, config_file: Path) -> None:
        """An existing file is kept without --force."""
        before = config_file.read_text()

        result = runner.invoke(app, ["--config", str(config_file), "config", "init"])

        assert result.exit_code == 1
        assert "--force" in result.output
        assert config_file.read_text() == before

    def test_init_force(self, config_file: Path) -> None:
        """--force replaces an existing file."""
        result = runner.invoke(app, ["--config", str(config_file), "config", "init", "--force"])

        assert result.exit_code == 0
        assert load_storage_config(config_file) == StorageConfig()
