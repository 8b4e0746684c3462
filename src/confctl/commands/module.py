"""Command group: modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confctl.commands._base import ConfGroup
from confctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from confctl.commands._context import AppContext

_MODULE_EXAMPLES = """\
  confctl module create webserver --version 2.0
  confctl module list
  confctl module get 1
  confctl module delete 1"""


@click.group(cls=ConfGroup, examples=_MODULE_EXAMPLES)
def module() -> None:
    """Manage modules (versioned groups of items)."""


@module.command(examples="  confctl module create webserver --version 2.0")
@click.argument("value")
@click.option("--version", "version", required=True, help="Module version.")
@click.pass_obj
def create(app: AppContext, value: str, version: str) -> None:
    """Create a module."""
    app.emit(CatalogService(app.catalog).create_module(value, version))


@module.command(examples="  confctl module get 1")
@click.argument("module_id", type=int)
@click.pass_obj
def get(app: AppContext, module_id: int) -> None:
    """Show one module."""
    app.emit(CatalogService(app.catalog).get_module(module_id))


@module.command(name="list", examples="  confctl module list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all modules."""
    app.emit(CatalogService(app.catalog).list_modules())


@module.command(examples="  confctl module delete 1")
@click.argument("module_id", type=int)
@click.pass_obj
def delete(app: AppContext, module_id: int) -> None:
    """Delete a module with its associations and dependency edges."""
    app.emit(CatalogService(app.catalog).delete_module(module_id))
