"""Catalog database engine and schema via SQLAlchemy Core."""

from confctl.infrastructure.database.engine import (
    create_db_engine,
    create_schema,
    default_db_url,
    ensure_data_dir,
)
from confctl.infrastructure.database.schema import (
    conf_item,
    conf_item_module,
    conf_module,
    conf_module_dependency,
    metadata,
)

__all__ = [
    "conf_item",
    "conf_item_module",
    "conf_module",
    "conf_module_dependency",
    "create_db_engine",
    "create_schema",
    "default_db_url",
    "ensure_data_dir",
    "metadata",
]
