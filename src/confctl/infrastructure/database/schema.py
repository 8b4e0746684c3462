"""SQLAlchemy Core table definitions for the confctl catalog.

Four tables: items, modules, the item/module association, and the
module dependency edges. Association and dependency rows cascade when
an endpoint is deleted.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    Table,
    Text,
)

metadata = MetaData()

conf_item = Table(
    "conf_item",
    metadata,
    Column("conf_item_id", Integer, primary_key=True, autoincrement=True),
    Column("conf_item_value", Text, nullable=False),
    Column("conf_item_type", Text, nullable=False),
    Column("conf_item_version", Text, nullable=False),
)

conf_module = Table(
    "conf_module",
    metadata,
    Column("conf_module_id", Integer, primary_key=True, autoincrement=True),
    Column("conf_module_value", Text, nullable=False),
    Column("conf_module_version", Text, nullable=False),
)

conf_item_module = Table(
    "conf_item_module",
    metadata,
    Column("conf_item_module_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "conf_item_id",
        Integer,
        ForeignKey("conf_item.conf_item_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "conf_module_id",
        Integer,
        ForeignKey("conf_module.conf_module_id", ondelete="CASCADE"),
        nullable=False,
    ),
)

conf_module_dependency = Table(
    "conf_module_dependency",
    metadata,
    Column(
        "dependent",
        Integer,
        ForeignKey("conf_module.conf_module_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "dependee",
        Integer,
        ForeignKey("conf_module.conf_module_id", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("dependent", "dependee"),
)

# ---------------------------------------------------------------------------
# Indexes for the resolver's read paths
# ---------------------------------------------------------------------------

Index("ix_item_module_module", conf_item_module.c.conf_module_id)
Index("ix_item_module_item", conf_item_module.c.conf_item_id)
Index("ix_module_dependency_dependee", conf_module_dependency.c.dependee)
