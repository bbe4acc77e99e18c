"""Unit tests for the main CLI application and global options."""

import logging
from pathlib import Path

from sandboxfs import __version__
from sandboxfs.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestGlobalOptions:
    """Tests for options handled by the main callback."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"sandboxfs version {__version__}" in result.output

    def test_help_lists_groups(self) -> None:
        """--help lists every command group."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for group in ("roots", "dir", "file", "find", "config"):
            assert group in result.output

    def test_no_args_shows_help(self) -> None:
        """Running without arguments shows usage."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_debug_enables_info(self, config_file: Path) -> None:
        """--debug lowers the package logger to INFO."""
        result = runner.invoke(app, ["--debug", "--config", str(config_file), "roots"])

        assert result.exit_code == 0
        assert logging.getLogger("sandboxfs").level == logging.INFO

    def test_debug_from_config(self, config_file: Path) -> None:
        """debug = true in the config has the same effect as --debug."""
        config_file.write_text(config_file.read_text().replace("debug = false", "debug = true"))

        result = runner.invoke(app, ["--config", str(config_file), "roots"])

        assert result.exit_code == 0
        assert logging.getLogger("sandboxfs").level == logging.INFO

    def test_quiet_by_default(self, config_file: Path) -> None:
        """Without debug only warnings and errors pass."""
        result = runner.invoke(app, ["--config", str(config_file), "roots"])

        assert result.exit_code == 0
        assert logging.getLogger("sandboxfs").level == logging.WARNING

    def test_invalid_config(self, tmp_path: Path) -> None:
        """An invalid config file is reported and exits 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("app_name = [broken")

        result = runner.invoke(app, ["--config", str(config_file), "roots"])

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output
