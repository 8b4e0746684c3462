"""The ``confctl`` entry point.

Global flags become :class:`ConfSettings` overrides. Config discovery,
logging and the lazily opened catalog all hang off the
:class:`AppContext` stored on ``ctx.obj``, which is closed when the
command finishes.
"""

from __future__ import annotations

from pathlib import Path

import click

from confctl import __version__
from confctl.commands import register_commands
from confctl.commands._base import ConfGroup
from confctl.commands._context import AppContext
from confctl.config.settings import ConfSettings

_EXAMPLES = """\
  confctl init
  confctl module create web --version 1.0
  confctl item create nginx.conf --type file --version 1.0
  confctl itemmodule create 1 1
  echo '[{"id": 1}]' | confctl insfile --modules --format text
  confctl --root /srv/catalog --json dependency check"""


@click.group(cls=ConfGroup, invoke_without_command=True, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="confctl")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this file instead of searching for confctl.toml.",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Catalog root (default: the config file's directory, else cwd).",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and span timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    root: Path | None,
    **flags: bool,
) -> None:
    """confctl: manage a configuration catalog and resolve install files."""
    app = AppContext(ConfSettings.from_cli(config_path=config_path, root=root, **flags))
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
