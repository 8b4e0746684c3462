"""InstallService — which items must be installed for a set of modules.

Parses the request body into module references, resolves the dependency
closure, and aggregates the closure's items. Malformed input is rejected
before the store is touched; storage failures abort the whole request
and are reported with a generic message.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from confctl.domain.closure import aggregate
from confctl.domain.errors import InvalidRequestError, StorageUnavailableError
from confctl.domain.models import ModuleRef
from confctl.services.base import BaseService
from confctl.services.contracts import InstallResultData, dump_validated
from confctl.services.result import ServiceResult
from confctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

_MODULE_REFS = TypeAdapter(list[ModuleRef])


def parse_module_refs(body: str | bytes) -> list[ModuleRef]:
    """Decode a JSON request body into module references.

    The body must be a JSON array of objects, each with a positive
    integer ``id``. An empty array is valid.

    Raises:
        InvalidRequestError: If the body is not JSON, not an array of
            objects, or any reference lacks a usable ``id``.
    """
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"could not decode JSON request body: {exc}"
        raise InvalidRequestError(msg) from exc

    try:
        return _MODULE_REFS.validate_python(raw)
    except ValidationError as exc:
        msg = f"one or more values are incorrect: {text.strip()}"
        raise InvalidRequestError(msg) from exc


class InstallService(BaseService):
    """Resolves install files from the module dependency graph."""

    @traced
    def insfile(self, body: str | bytes, *, include_modules: bool = False) -> ServiceResult:
        """Compute the items (and optionally modules) required by a request.

        Args:
            body: JSON array of module references, e.g. ``[{"id": 1}]``.
            include_modules: Also return every module in the closure.
        """
        op = "insfile"
        try:
            refs = parse_module_refs(body)
        except InvalidRequestError as exc:
            logger.debug("Rejected install request: %s", exc)
            return ServiceResult.failure(op, "INVALID_INPUT", str(exc))

        roots = sorted({ref.id for ref in refs})

        try:
            with trace_span("aggregate") as span:
                installation = aggregate(
                    self._catalog.store,
                    roots,
                    include_modules=include_modules,
                )
                if span:
                    span.annotate(roots=len(roots), items=len(installation.items))
                    if installation.modules is not None:
                        span.annotate(closure=len(installation.modules))
        except StorageUnavailableError as exc:
            return self._storage_failure(op, exc)

        items = sorted(installation.items, key=lambda i: (i.value, i.id))
        modules = None
        if installation.modules is not None:
            modules = [{"id": module_id} for module_id in sorted(installation.modules)]

        data = dump_validated(
            InstallResultData,
            {
                "roots": roots,
                "items": [item.model_dump() for item in items],
                "modules": modules,
            },
        )
        return ServiceResult(ok=True, op=op, data=data)
