"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from confctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["item", "--help"], ["create", "get", "list", "delete"]),
    (["item", "create", "--help"], ["VALUE", "--type", "--version"]),
    (["item", "get", "--help"], ["ITEM_ID"]),
    (["module", "--help"], ["create", "get", "list", "delete"]),
    (["module", "create", "--help"], ["VALUE", "--version"]),
    (["itemmodule", "--help"], ["create", "get", "list", "delete"]),
    (["itemmodule", "create", "--help"], ["ITEM_ID", "MODULE_ID"]),
    (["dependency", "--help"], ["add", "list", "remove", "check"]),
    (["dependency", "add", "--help"], ["DEPENDENT", "DEPENDEE"]),
    (["dependency", "list", "--help"], ["--dependent", "--dependee"]),
    (["dependency", "remove", "--help"], ["--dependent", "--dependee"]),
    (["dependency", "check", "--help"], ["cycles"]),
    (["init", "--help"], ["idempotent"]),
    (["insfile", "--help"], ["REQUEST", "--modules", "--no-modules", "--format"]),
]


def _help_id(args_keywords: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = args_keywords
    return "_".join(a for a in args if a != "--help")


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_help_id(item) for item in HELP_COMMANDS],
)
def test_command_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"
