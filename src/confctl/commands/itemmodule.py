"""Command group: item-module associations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confctl.commands._base import ConfGroup
from confctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from confctl.commands._context import AppContext

_ITEMMODULE_EXAMPLES = """\
  confctl itemmodule create 3 1
  confctl itemmodule list
  confctl itemmodule get 7
  confctl itemmodule delete 7"""


@click.group(cls=ConfGroup, examples=_ITEMMODULE_EXAMPLES)
def itemmodule() -> None:
    """Manage which items belong to which modules."""


@itemmodule.command(examples="  confctl itemmodule create 3 1")
@click.argument("item_id", type=int)
@click.argument("module_id", type=int)
@click.pass_obj
def create(app: AppContext, item_id: int, module_id: int) -> None:
    """Attach ITEM_ID to MODULE_ID."""
    app.emit(CatalogService(app.catalog).create_item_module(item_id, module_id))


@itemmodule.command(examples="  confctl itemmodule get 7")
@click.argument("item_module_id", type=int)
@click.pass_obj
def get(app: AppContext, item_module_id: int) -> None:
    """Show one association."""
    app.emit(CatalogService(app.catalog).get_item_module(item_module_id))


@itemmodule.command(name="list", examples="  confctl itemmodule list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all associations."""
    app.emit(CatalogService(app.catalog).list_item_modules())


@itemmodule.command(examples="  confctl itemmodule delete 7")
@click.argument("item_module_id", type=int)
@click.pass_obj
def delete(app: AppContext, item_module_id: int) -> None:
    """Delete an association (the item and module remain)."""
    app.emit(CatalogService(app.catalog).delete_item_module(item_module_id))
