"""Command group: configuration items."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confctl.commands._base import ConfGroup
from confctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from confctl.commands._context import AppContext

_ITEM_EXAMPLES = """\
  confctl item create nginx.conf --type file --version 1.2.0
  confctl item list
  confctl item get 3
  confctl item delete 3"""


@click.group(cls=ConfGroup, examples=_ITEM_EXAMPLES)
def item() -> None:
    """Manage configuration items."""


@item.command(
    examples="""\
  confctl item create nginx.conf --type file --version 1.2.0
  confctl --json item create LOG_LEVEL=debug --type env --version 1"""
)
@click.argument("value")
@click.option("--type", "item_type", required=True, help="Item type (e.g. file, env).")
@click.option("--version", "version", required=True, help="Item version.")
@click.pass_obj
def create(app: AppContext, value: str, item_type: str, version: str) -> None:
    """Create an item."""
    app.emit(CatalogService(app.catalog).create_item(value, item_type, version))


@item.command(examples="  confctl item get 3")
@click.argument("item_id", type=int)
@click.pass_obj
def get(app: AppContext, item_id: int) -> None:
    """Show one item."""
    app.emit(CatalogService(app.catalog).get_item(item_id))


@item.command(
    name="list",
    examples="""\
  confctl item list
  confctl -q item list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all items."""
    app.emit(CatalogService(app.catalog).list_items())


@item.command(examples="  confctl item delete 3")
@click.argument("item_id", type=int)
@click.pass_obj
def delete(app: AppContext, item_id: int) -> None:
    """Delete an item and its module associations."""
    app.emit(CatalogService(app.catalog).delete_item(item_id))
