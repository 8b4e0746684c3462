"""Install-file wire encodings.

Renders an ``insfile`` ServiceResult as the body an API client
receives, together with the HTTP-equivalent status and content type:

- structured: ``application/json`` with ``items``, ``modules`` and
  ``error`` keys. The collections are always lists, never null.
- text: ``text/plain`` with one CRLF-terminated line per item value
  (RFC 2046 line breaks). With modules, each group gets a label line
  and is fenced by a 20-dash separator.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

if TYPE_CHECKING:
    from confctl.services.result import ServiceResult

CRLF = "\r\n"
SEPARATOR = "-" * 20 + CRLF

WireFormat: TypeAlias = Literal["json", "text"]

_STATUS_BY_CODE: dict[str, int] = {
    "INVALID_INPUT": 400,
    "STORAGE_UNAVAILABLE": 500,
}


@dataclass(frozen=True)
class WireResponse:
    """A rendered response body with its status and content type."""

    status: int
    content_type: str
    body: str

    @property
    def ok(self) -> bool:
        return self.status < 400


def status_for(result: ServiceResult) -> int:
    """Map a result onto an HTTP-equivalent status code."""
    if result.ok:
        return 200
    assert result.error is not None
    return _STATUS_BY_CODE.get(result.error.code, 500)


def _error_message(result: ServiceResult) -> str:
    assert result.error is not None
    return result.error.message


def render_structured(result: ServiceResult) -> WireResponse:
    """Render *result* as the structured JSON envelope."""
    payload: dict[str, Any] = {"items": [], "modules": [], "error": None}
    if result.ok:
        payload["items"] = list(result.data.get("items") or [])
        payload["modules"] = list(result.data.get("modules") or [])
    else:
        payload["error"] = _error_message(result)

    return WireResponse(
        status=status_for(result),
        content_type="application/json",
        body=json.dumps(payload) + "\n",
    )


def render_text(result: ServiceResult) -> WireResponse:
    """Render *result* as line-oriented plain text.

    Grouping is used only when the result carries a module list, i.e.
    when module inclusion was requested.
    """
    status = status_for(result)
    if not result.ok:
        return WireResponse(status, "text/plain", _error_message(result) + CRLF)

    items = result.data.get("items") or []
    modules = result.data.get("modules")
    item_lines = "".join(f"{item['value']}{CRLF}" for item in items)

    if modules is None:
        return WireResponse(status, "text/plain", item_lines)

    module_lines = "".join(f"{module['id']}{CRLF}" for module in modules)
    body = (
        f"items{CRLF}{SEPARATOR}{item_lines}{SEPARATOR}"
        f"modules{CRLF}{SEPARATOR}{module_lines}{SEPARATOR}"
    )
    return WireResponse(status, "text/plain", body)


def render_wire(result: ServiceResult, fmt: WireFormat) -> WireResponse:
    """Dispatch to the renderer for *fmt*."""
    if fmt == "text":
        return render_text(result)
    return render_structured(result)
