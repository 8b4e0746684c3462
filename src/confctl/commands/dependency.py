"""Command group: module dependency edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confctl.commands._base import ConfGroup
from confctl.services.catalog import CatalogService
from confctl.services.dependency import DependencyService

if TYPE_CHECKING:
    from confctl.commands._context import AppContext

_DEPENDENCY_EXAMPLES = """\
  confctl dependency add 1 2
  confctl dependency list --dependent 1
  confctl dependency remove --dependent 1 --dependee 2
  confctl dependency remove --dependee 2
  confctl dependency check"""


@click.group(cls=ConfGroup, examples=_DEPENDENCY_EXAMPLES)
def dependency() -> None:
    """Manage the module depends-on graph."""


@dependency.command(
    examples="""\
  confctl dependency add 1 2
  confctl dependency add 4 4"""
)
@click.argument("dependent", type=int)
@click.argument("dependee", type=int)
@click.pass_obj
def add(app: AppContext, dependent: int, dependee: int) -> None:
    """Record that DEPENDENT requires DEPENDEE."""
    app.emit(CatalogService(app.catalog).create_module_dependency(dependent, dependee))


@dependency.command(
    name="list",
    examples="""\
  confctl dependency list
  confctl dependency list --dependent 1
  confctl dependency list --dependee 2""",
)
@click.option("--dependent", type=int, default=None, help="Only edges from this module.")
@click.option("--dependee", type=int, default=None, help="Only edges to this module.")
@click.pass_obj
def list_cmd(app: AppContext, dependent: int | None, dependee: int | None) -> None:
    """List dependency edges."""
    app.emit(
        CatalogService(app.catalog).list_module_dependencies(
            dependent=dependent, dependee=dependee
        )
    )


@dependency.command(
    examples="""\
  confctl dependency remove --dependent 1 --dependee 2
  confctl dependency remove --dependent 1
  confctl dependency remove --dependee 2"""
)
@click.option("--dependent", type=int, default=None, help="Remove edges from this module.")
@click.option("--dependee", type=int, default=None, help="Remove edges to this module.")
@click.pass_obj
def remove(app: AppContext, dependent: int | None, dependee: int | None) -> None:
    """Remove edges by dependent, dependee, or both."""
    app.emit(
        CatalogService(app.catalog).delete_module_dependencies(
            dependent=dependent, dependee=dependee
        )
    )


@dependency.command(
    examples="""\
  confctl dependency check
  confctl --json dependency check"""
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Report dependency cycles, self-loops, and dangling edges."""
    app.emit(DependencyService(app.catalog).check())
