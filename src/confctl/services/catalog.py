"""CatalogService — create, read, and delete catalog entities.

Items, modules, item-module associations, and module dependencies are
immutable: there is no update operation. Required values are checked
before the store is called. Every write invalidates the cached
dependency graph.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from confctl.domain.errors import ConstraintViolationError, StorageUnavailableError
from confctl.services.base import BaseService
from confctl.services.result import ServiceResult
from confctl.services.telemetry import traced


def _missing(**values: object) -> list[str]:
    """Return the names of blank strings and non-positive ids in *values*."""
    missing: list[str] = []
    for name, value in values.items():
        if value is None:
            missing.append(name)
        elif isinstance(value, str) and not value.strip():
            missing.append(name)
        elif isinstance(value, int) and value <= 0:
            missing.append(name)
    return missing


class CatalogService(BaseService):
    """Handles catalog management operations."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _execute(
        self,
        op: str,
        action: Callable[[], dict[str, Any] | None],
        *,
        write: bool = False,
        not_found: str | None = None,
    ) -> ServiceResult:
        """Run a store *action* and wrap its payload or failure.

        An action returning None is reported as NOT_FOUND with *not_found*
        as the message.
        """
        try:
            data = action()
        except ConstraintViolationError as exc:
            return ServiceResult.failure(op, "CONFLICT", str(exc))
        except StorageUnavailableError as exc:
            return self._storage_failure(op, exc)
        finally:
            if write:
                self._catalog.graph.invalidate()

        if data is None:
            return ServiceResult.failure(op, "NOT_FOUND", not_found or "not found")
        return ServiceResult(ok=True, op=op, data=data)

    def _invalid(self, op: str, missing: list[str]) -> ServiceResult:
        return ServiceResult.failure(
            op,
            "INVALID_INPUT",
            f"missing values: {', '.join(missing)}",
            missing=missing,
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @traced
    def create_item(self, value: str, item_type: str, version: str) -> ServiceResult:
        op = "create_item"
        missing = _missing(value=value, type=item_type, version=version)
        if missing:
            return self._invalid(op, missing)

        def action() -> dict[str, Any]:
            item_id = self._catalog.store.create_item(value, item_type, version)
            return {"id": item_id, "value": value, "type": item_type, "version": version}

        return self._execute(op, action, write=True)

    @traced
    def get_item(self, item_id: int) -> ServiceResult:
        def action() -> dict[str, Any] | None:
            item = self._catalog.store.get_item(item_id)
            return item.model_dump() if item is not None else None

        return self._execute("get_item", action, not_found=f"Item {item_id} not found")

    @traced
    def list_items(self) -> ServiceResult:
        def action() -> dict[str, Any]:
            items = [item.model_dump() for item in self._catalog.store.list_items()]
            return {"count": len(items), "items": items}

        return self._execute("list_items", action)

    @traced
    def delete_item(self, item_id: int) -> ServiceResult:
        def action() -> dict[str, Any]:
            return {"id": item_id, "rows_affected": self._catalog.store.delete_item(item_id)}

        return self._execute("delete_item", action, write=True)

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    @traced
    def create_module(self, value: str, version: str) -> ServiceResult:
        op = "create_module"
        missing = _missing(value=value, version=version)
        if missing:
            return self._invalid(op, missing)

        def action() -> dict[str, Any]:
            module_id = self._catalog.store.create_module(value, version)
            return {"id": module_id, "value": value, "version": version}

        return self._execute(op, action, write=True)

    @traced
    def get_module(self, module_id: int) -> ServiceResult:
        def action() -> dict[str, Any] | None:
            module = self._catalog.store.get_module(module_id)
            return module.model_dump() if module is not None else None

        return self._execute("get_module", action, not_found=f"Module {module_id} not found")

    @traced
    def list_modules(self) -> ServiceResult:
        def action() -> dict[str, Any]:
            modules = [module.model_dump() for module in self._catalog.store.list_modules()]
            return {"count": len(modules), "items": modules}

        return self._execute("list_modules", action)

    @traced
    def delete_module(self, module_id: int) -> ServiceResult:
        def action() -> dict[str, Any]:
            return {
                "id": module_id,
                "rows_affected": self._catalog.store.delete_module(module_id),
            }

        return self._execute("delete_module", action, write=True)

    # ------------------------------------------------------------------
    # Item-module associations
    # ------------------------------------------------------------------

    @traced
    def create_item_module(self, item_id: int, module_id: int) -> ServiceResult:
        op = "create_item_module"
        missing = _missing(item_id=item_id, module_id=module_id)
        if missing:
            return self._invalid(op, missing)

        def action() -> dict[str, Any]:
            item_module_id = self._catalog.store.create_item_module(item_id, module_id)
            return {"id": item_module_id, "item_id": item_id, "module_id": module_id}

        return self._execute(op, action, write=True)

    @traced
    def get_item_module(self, item_module_id: int) -> ServiceResult:
        def action() -> dict[str, Any] | None:
            item_module = self._catalog.store.get_item_module(item_module_id)
            return item_module.model_dump() if item_module is not None else None

        return self._execute(
            "get_item_module",
            action,
            not_found=f"Item module {item_module_id} not found",
        )

    @traced
    def list_item_modules(self) -> ServiceResult:
        def action() -> dict[str, Any]:
            rows = [im.model_dump() for im in self._catalog.store.list_item_modules()]
            return {"count": len(rows), "items": rows}

        return self._execute("list_item_modules", action)

    @traced
    def delete_item_module(self, item_module_id: int) -> ServiceResult:
        def action() -> dict[str, Any]:
            return {
                "id": item_module_id,
                "rows_affected": self._catalog.store.delete_item_module(item_module_id),
            }

        return self._execute("delete_item_module", action, write=True)

    # ------------------------------------------------------------------
    # Module dependencies
    # ------------------------------------------------------------------

    @traced
    def create_module_dependency(self, dependent: int, dependee: int) -> ServiceResult:
        """Record that *dependent* requires *dependee*. Self-loops are accepted."""
        op = "create_module_dependency"
        missing = _missing(dependent=dependent, dependee=dependee)
        if missing:
            return self._invalid(op, missing)

        def action() -> dict[str, Any]:
            return self._catalog.store.create_module_dependency(dependent, dependee).model_dump()

        return self._execute(op, action, write=True)

    @traced
    def list_module_dependencies(
        self,
        *,
        dependent: int | None = None,
        dependee: int | None = None,
    ) -> ServiceResult:
        def action() -> dict[str, Any]:
            deps = self._catalog.store.list_module_dependencies(
                dependent=dependent, dependee=dependee
            )
            rows = [dep.model_dump() for dep in deps]
            return {"count": len(rows), "items": rows}

        return self._execute("list_module_dependencies", action)

    @traced
    def delete_module_dependencies(
        self,
        *,
        dependent: int | None = None,
        dependee: int | None = None,
    ) -> ServiceResult:
        """Delete edges by dependent, by dependee, or the exact pair."""
        op = "delete_module_dependencies"
        if dependent is None and dependee is None:
            return self._invalid(op, ["dependent", "dependee"])

        def action() -> dict[str, Any]:
            count = self._catalog.store.delete_module_dependencies(
                dependent=dependent, dependee=dependee
            )
            return {"dependent": dependent, "dependee": dependee, "rows_affected": count}

        return self._execute(op, action, write=True)
