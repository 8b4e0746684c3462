"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from confctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from confctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    """Extract an ID (or a dependency pair) from a row dict."""
    if not isinstance(item, dict):
        return ""
    if item.get("id") is not None:
        return str(item["id"])
    if "dependent" in item and "dependee" in item:
        return f"{item['dependent']}->{item['dependee']}"
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "conf.ok"), (f"  {result.op}", "conf.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="conf.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="conf.id")
    elif key == "value":
        v = Text(str(value), style="conf.value")
    elif key == "version":
        v = Text(str(value), style="conf.version")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "conf.error"), (f"  {result.op}", "conf.op"), f" - {msg}")
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_record(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single created, fetched, or deleted record as fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        if value is not None:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list results as a table with one column per row key."""
    rows: list[dict[str, Any]] = result.data.get("items", [])
    if rows:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        for column in rows[0]:
            style = "conf.id" if column == "id" else ""
            table.add_column(column.replace("_", " ").title(), style=style, no_wrap=True)
        for row in rows:
            table.add_row(*(str(v) for v in row.values()))
        console.print(table)
    console.print(f"\n{result.data.get('count', len(rows))} rows")
    if verbose:
        _render_meta(console, result)


def _render_insfile(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an install result: items table, then closure modules if present."""
    _status_line(console, result)
    _field(console, "roots", ", ".join(str(r) for r in result.data.get("roots", [])))

    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="conf.id", no_wrap=True)
    table.add_column("Value", style="conf.value")
    table.add_column("Type")
    table.add_column("Version", style="conf.version")
    for item in items:
        table.add_row(str(item["id"]), item["value"], item["type"], item["version"])
    console.print(table)

    modules = result.data.get("modules")
    if modules is not None:
        _field(console, "modules", ", ".join(str(m["id"]) for m in modules))
    if verbose:
        _render_meta(console, result)


def _render_dependency_check(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "modules", d["modules"])
    _field(console, "edges", d["edges"])
    if d["acyclic"]:
        console.print(Text("  no cycles", style="conf.ok"))
    for cycle in d["cycles"]:
        path = " -> ".join(str(m) for m in [*cycle, cycle[0]])
        console.print(Text.assemble(("  cycle ", "conf.warning"), path))
    for module_id in d["self_loops"]:
        console.print(Text.assemble(("  self-loop ", "conf.warning"), str(module_id)))
    for edge in d["dangling"]:
        console.print(
            Text.assemble(
                ("  dangling ", "conf.error"),
                f"{edge['dependent']} -> {edge['dependee']}",
            )
        )
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    # Records
    "create_item": _render_record,
    "get_item": _render_record,
    "delete_item": _render_record,
    "create_module": _render_record,
    "get_module": _render_record,
    "delete_module": _render_record,
    "create_item_module": _render_record,
    "get_item_module": _render_record,
    "delete_item_module": _render_record,
    "create_module_dependency": _render_record,
    "delete_module_dependencies": _render_record,
    # Lists
    "list_items": _render_table,
    "list_modules": _render_table,
    "list_item_modules": _render_table,
    "list_module_dependencies": _render_table,
    # Resolution
    "insfile": _render_insfile,
    "dependency_check": _render_dependency_check,
}
