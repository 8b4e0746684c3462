"""Tests for the root confctl CLI."""

import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from confctl import __version__
from confctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "confctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_root")
def test_cli_no_args(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output
    # Help alone never opens the catalog.
    assert not (tmp_path / ".confctl").exists()


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [
        ["--json"],
        ["-q"],
        ["-v"],
        ["--log-json"],
        ["-c", "/tmp/confctl-missing.toml"],
        ["--root", "/tmp/confctl-root"],
    ],
    ids=["json", "quiet", "verbose", "log-json", "config", "root"],
)
def test_global_flag_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_root")
def test_verbose_json_includes_telemetry(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--json", "module", "list"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["meta"]["telemetry"]["name"] == "CatalogService.list_modules"


@pytest.mark.usefixtures("_isolated_root")
def test_config_flag_selects_database(cli_runner: CliRunner, tmp_path: Path) -> None:
    db = tmp_path / "from-config.db"
    cfg = tmp_path / "custom.toml"
    cfg.write_text(f'[database]\nurl = "sqlite:///{db}"\n')
    result = cli_runner.invoke(cli, ["-c", str(cfg), "init"])
    assert result.exit_code == 0
    assert db.exists()


# --- Command groups registered ---

EXPECTED_GROUPS = ["item", "module", "itemmodule", "dependency"]

EXPECTED_COMMANDS = ["init", "insfile"]


@pytest.mark.parametrize("group", EXPECTED_GROUPS)
def test_group_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0, f"{group} --help failed: {result.output}"


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


def test_all_commands_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in EXPECTED_GROUPS + EXPECTED_COMMANDS:
        assert name in result.output, f"{name} missing from --help"


def test_commands_listed_in_registration_order(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    section = result.output.split("Commands:\n", 1)[1]
    names = [m.group(1) for m in re.finditer(r"^  (\S+)", section, re.MULTILINE)]
    assert names == EXPECTED_GROUPS + EXPECTED_COMMANDS


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "confctl insfile --modules --format text" in result.output


@pytest.mark.parametrize("args", [["--help"], ["item", "--help"], ["insfile", "--help"]])
def test_help_points_at_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert "--examples' for usage examples." in result.output


# --- Catalog location ---


def test_root_flag_selects_catalog(cli_runner: CliRunner, tmp_path: Path) -> None:
    root = tmp_path / "catalog"
    result = cli_runner.invoke(cli, ["--root", str(root), "init"])
    assert result.exit_code == 0
    assert (root / ".confctl" / "confctl.db").exists()


def test_config_searched_from_root_not_cwd(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    elsewhere = tmp_path / "elsewhere.db"
    (cwd / "confctl.toml").write_text(f'[database]\nurl = "sqlite:///{elsewhere}"\n')
    monkeypatch.chdir(cwd)
    root = tmp_path / "other"
    root.mkdir()
    result = cli_runner.invoke(cli, ["--root", str(root), "init"])
    assert result.exit_code == 0
    assert (root / ".confctl" / "confctl.db").exists()
    assert not elsewhere.exists()


@pytest.mark.usefixtures("_isolated_root")
def test_sql_echo_keeps_stdout_clean(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "confctl.toml").write_text("[database]\necho = true\n")
    result = cli_runner.invoke(cli, ["--json", "module", "list"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["ok"] is True
    assert "SELECT" in result.stderr
