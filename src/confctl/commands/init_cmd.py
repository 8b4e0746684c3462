"""init — create the catalog database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confctl.commands._base import ConfCommand
from confctl.services.init import InitService

if TYPE_CHECKING:
    from confctl.commands._context import AppContext


@click.command(
    "init",
    cls=ConfCommand,
    examples="""\
  confctl init
  confctl --config ./confctl.toml init
  CONFCTL_DATABASE__URL=sqlite:////tmp/conf.db confctl init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the catalog schema (idempotent)."""
    app.emit(InitService(app.catalog).init())
