"""Database engine setup.

SQLite is the default persistence layer: WAL mode for concurrent reads
and foreign keys switched on so association rows cascade with their
endpoints. Any other SQLAlchemy URL can be configured instead.

SQL statement logging goes through the ``sqlalchemy.engine`` logger
(see :func:`confctl.config.logging.configure_logging`), never through
``create_engine(echo=...)``, which would write to stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from confctl.domain.errors import StorageUnavailableError
from confctl.infrastructure.database.schema import metadata

DATA_DIR = ".confctl"
DB_FILENAME = "confctl.db"


def default_db_url(root: Path) -> str:
    """Return the SQLite URL for the catalog database under *root*."""
    return f"sqlite:///{root / DATA_DIR / DB_FILENAME}"


def ensure_data_dir(root: Path) -> Path:
    """Create ``{root}/.confctl`` if needed and return it.

    Raises:
        StorageUnavailableError: If the directory cannot be created.
    """
    data_dir = root / DATA_DIR
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"could not create catalog directory {data_dir}: {exc}"
        raise StorageUnavailableError(msg) from exc
    return data_dir


def create_db_engine(url: str) -> Engine:
    """Create an engine; SQLite connections get WAL mode and foreign keys.

    No connection is opened here, so this never fails for an unreachable
    database. The first statement does.
    """
    engine = create_engine(url)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    """Create all tables from :data:`schema.metadata` (idempotent).

    Raises:
        StorageUnavailableError: If the database cannot be reached or written.
    """
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as exc:
        msg = f"could not create catalog schema at {engine.url}: {exc}"
        raise StorageUnavailableError(msg) from exc
