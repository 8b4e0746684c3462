"""InitService — create the catalog schema and report where it lives."""

from __future__ import annotations

from confctl.domain.errors import StorageUnavailableError
from confctl.services.base import BaseService
from confctl.services.result import ServiceResult
from confctl.services.telemetry import traced


class InitService(BaseService):
    """Initializes the catalog database."""

    @traced
    def init(self) -> ServiceResult:
        """Create any missing tables. Safe to run on an existing catalog."""
        op = "init"
        try:
            self._catalog.ensure_schema()
        except StorageUnavailableError as exc:
            return self._storage_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "root": str(self._catalog.root),
                "database": self._catalog.engine.url.render_as_string(),
            },
        )
