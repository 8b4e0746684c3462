"""Catalog — the single dependency injected into every service.

Owns the database engine, the graph store, and the lazily built
dependency graph. Services read and write through :attr:`store`; the
graph is invalidated after any write so diagnostics see fresh edges.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from confctl.domain.errors import StorageUnavailableError
from confctl.infrastructure.database.engine import (
    create_db_engine,
    create_schema,
    default_db_url,
    ensure_data_dir,
)
from confctl.infrastructure.graph.engine import GraphEngine
from confctl.infrastructure.repositories.graph_store import GraphStore

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from confctl.config.settings import ConfSettings

logger = logging.getLogger(__name__)


class Catalog:
    """Repository facade over the catalog database.

    The engine's connection pool is the only shared resource between
    requests; the store opens a connection per call.
    """

    def __init__(self, settings: ConfSettings) -> None:
        self._settings = settings
        url = settings.database.url
        if url is None:
            url = default_db_url(settings.root)
        self._engine: Engine = create_db_engine(url)
        self._store = GraphStore(self._engine)
        self._graph = GraphEngine(self._store)
        try:
            self.ensure_schema()
        except StorageUnavailableError as exc:
            # Requests still run and report the failure individually.
            logger.warning("Catalog schema unavailable: %s", exc)
        else:
            logger.debug("Catalog opened at %s", self._engine.url)

    @property
    def root(self) -> Path:
        return self._settings.root

    @property
    def settings(self) -> ConfSettings:
        return self._settings

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def store(self) -> GraphStore:
        return self._store

    @property
    def graph(self) -> GraphEngine:
        return self._graph

    def ensure_schema(self) -> None:
        """Create the data directory and any missing tables.

        The directory is only needed for the default SQLite URL. Raises
        StorageUnavailableError when either step fails.
        """
        if self._settings.database.url is None:
            ensure_data_dir(self._settings.root)
        create_schema(self._engine)

    def close(self) -> None:
        """Dispose the engine and its connection pool."""
        self._engine.dispose()
