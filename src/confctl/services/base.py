"""BaseService — foundation for all confctl services.

Every service receives a :class:`Catalog` at construction time and maps
store exceptions onto :class:`ServiceResult` errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from confctl.services.result import ServiceResult

if TYPE_CHECKING:
    from confctl.infrastructure.catalog import Catalog

logger = logging.getLogger(__name__)

# Storage failures never leak their cause to the caller.
INTERNAL_ERROR_MESSAGE = "Ups something went wrong"


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CatalogService(BaseService):
            def create_item(self, value: str, ...) -> ServiceResult:
                ...self._catalog.store.create_item(...)
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @staticmethod
    def _storage_failure(op: str, exc: Exception) -> ServiceResult:
        """Log the storage cause and return the generic error result."""
        logger.error("Storage failure during %s: %s", op, exc, exc_info=exc)
        return ServiceResult.failure(op, "STORAGE_UNAVAILABLE", INTERNAL_ERROR_MESSAGE)
