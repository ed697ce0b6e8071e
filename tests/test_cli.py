"""Tests for strixt CLI."""

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from strixt.cli import cli
from strixt.config import StrixtConfig


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real ~/.strixt/config.json."""
    path = tmp_path / "home" / ".strixt" / "config.json"
    monkeypatch.setattr(StrixtConfig, "get_config_path", classmethod(lambda cls: path))
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    (root / "clean.txt").write_bytes(b"all good\n")
    (root / "indent.py").write_bytes(b"def f():\n\treturn 1\n")
    return root


class TestCLI:
    """Tests for the main CLI."""

    def test_cli_version(self, runner: CliRunner) -> None:
        """Test CLI version option."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_cli_help(self, runner: CliRunner) -> None:
        """Test CLI help output."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "strixt" in result.output
        assert "style checker" in result.output
        assert "check" in result.output
        assert "config" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test_clean_file(self, runner: CliRunner, project: Path) -> None:
        result = runner.invoke(cli, ["check", str(project / "clean.txt")])
        assert result.exit_code == 0
        assert result.output == ""

    def test_peeves_exit_status(self, runner: CliRunner, project: Path) -> None:
        """Test peeves are printed and the run exits 1."""
        path = project / "indent.py"
        result = runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert f"{path}:2:1: error: tabs not allowed (use -t to allow)" in result.output

    def test_tabs_flag(self, runner: CliRunner, project: Path) -> None:
        result = runner.invoke(cli, ["check", "-t", str(project)])
        assert result.exit_code == 0

    def test_tabs_from_config(self, runner: CliRunner, project: Path) -> None:
        StrixtConfig(tabs_allowed=True).save()
        result = runner.invoke(cli, ["check", str(project)])
        assert result.exit_code == 0

    def test_non_integer_config_uses_defaults(
        self, runner: CliRunner, project: Path, isolated_config: Path
    ) -> None:
        """Test a hand-edited config with float limits does not break check."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(
            json.dumps({"max_shown_peeves_per_file": 2.5, "max_text_file_size": 10.5})
        )
        result = runner.invoke(cli, ["check", str(project / "indent.py")])
        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        assert "tabs not allowed" in result.output

    def test_default_current_directory(self, runner: CliRunner) -> None:
        with runner.isolated_filesystem():
            Path("notes.txt").write_bytes(b"trailing \n")
            result = runner.invoke(cli, ["check"])
            assert result.exit_code == 1
            assert "notes.txt:1:10: error: whitespace at end of line" in result.output

    def test_verbose(self, runner: CliRunner, project: Path) -> None:
        (project / ".git").mkdir()
        result = runner.invoke(cli, ["check", "-v", "-t", str(project)])
        assert result.exit_code == 0
        assert f"{project / 'clean.txt'}: ok" in result.output
        assert f"{project / '.git'}: skipping hidden directory" in result.output

    def test_verbose_and_quiet(self, runner: CliRunner, project: Path) -> None:
        result = runner.invoke(cli, ["check", "-v", "-q", str(project)])
        assert result.exit_code == 2
        assert "mutually exclusive" in result.output

    def test_binary_root_reported(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\x00\x00")
        result = runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 0
        assert "skipping binary file" in result.output

    def test_missing_path(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test an untraversable path is fatal."""
        result = runner.invoke(cli, ["check", str(tmp_path / "missing")])
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_max_peeves(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "many.txt"
        path.write_bytes(b"\x01\x01\x01\x01\n")
        result = runner.invoke(cli, ["check", "--max-peeves", "1", str(path)])
        assert result.exit_code == 1
        assert "3 more peeves not shown" in result.output

    def test_json_format(self, runner: CliRunner, project: Path) -> None:
        result = runner.invoke(cli, ["check", "-f", "json", "-j", "2", str(project)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert [os.path.basename(f["path"]) for f in data["files"]] == ["indent.py"]
        assert data["summary"]["files_checked"] == 2


class TestConfigCommands:
    """Tests for the config command group."""

    def test_config_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "set" in result.output
        assert "reset" in result.output

    def test_config_set_and_show(self, runner: CliRunner, isolated_config: Path) -> None:
        result = runner.invoke(cli, ["config", "set", "tabs_allowed", "true"])
        assert result.exit_code == 0
        assert "tabs_allowed = True" in result.output
        assert isolated_config.exists()

        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "tabs_allowed:" in result.output
        assert "True" in result.output

    def test_config_set_unknown(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "set", "theme", "nord"])
        assert result.exit_code == 1
        assert "Unknown config key" in result.output

    def test_config_reset(self, runner: CliRunner) -> None:
        StrixtConfig(jobs=8).save()
        result = runner.invoke(cli, ["config", "reset", "-y"])
        assert result.exit_code == 0
        assert StrixtConfig.load().jobs == 1

    def test_config_path(self, runner: CliRunner, isolated_config: Path) -> None:
        result = runner.invoke(cli, ["config", "path"])
        assert result.exit_code == 0
        assert str(isolated_config) in result.output


class TestTUICommand:
    """Tests for the TUI command."""

    def test_tui_command_exists(self, runner: CliRunner) -> None:
        """Test that tui command is available."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "tui" in result.output
        assert "Textual TUI" in result.output
