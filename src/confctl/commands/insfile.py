"""insfile — resolve the items to install for a set of modules."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from confctl.commands._base import ConfCommand
from confctl.output.wire import render_wire
from confctl.services.install import InstallService

if TYPE_CHECKING:
    from confctl.commands._context import AppContext


@click.command(
    cls=ConfCommand,
    examples="""\
  echo '[{"id": 1}, {"id": 4}]' | confctl insfile
  confctl insfile request.json --modules
  confctl insfile request.json --format text
  confctl insfile request.json --modules --format text""",
)
@click.argument("request", type=click.File("rb"), default="-")
@click.option(
    "--modules/--no-modules",
    "include_modules",
    default=None,
    help="Also list every module in the dependency closure.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Wire encoding of the response.",
)
@click.pass_obj
def insfile(
    app: AppContext,
    request: BinaryIO,
    include_modules: bool | None,
    fmt: str | None,
) -> None:
    """Compute the install file for the modules listed in REQUEST.

    REQUEST is a JSON array of module references such as
    ``[{"id": 1}]``, read from a file or ``-`` for stdin.
    """
    defaults = app.settings.insfile
    if include_modules is None:
        include_modules = defaults.include_modules
    wire_format = fmt or defaults.format

    result = InstallService(app.catalog).insfile(request.read(), include_modules=include_modules)
    if app.settings.json_output:
        app.emit(result)
        return
    app.emit_wire(render_wire(result, wire_format))
