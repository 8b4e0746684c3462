"""Graph store — SQL for the catalog and the resolver's read primitives.

Every method opens its own connection from the engine pool, so one
store instance is safe to share between concurrent requests. Driver
failures surface as :class:`StorageUnavailableError`; constraint
violations on writes surface as :class:`ConstraintViolationError`.
Nothing is retried.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from confctl.domain.errors import ConstraintViolationError, StorageUnavailableError
from confctl.domain.models import Item, ItemModule, Module, ModuleDependency
from confctl.infrastructure.database.schema import (
    conf_item,
    conf_item_module,
    conf_module,
    conf_module_dependency,
)


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Translate SQLAlchemy exceptions into the confctl error taxonomy."""
    try:
        yield
    except IntegrityError as exc:
        msg = f"could not {action}: {exc.orig}"
        raise ConstraintViolationError(msg) from exc
    except SQLAlchemyError as exc:
        msg = f"could not {action}: {exc}"
        raise StorageUnavailableError(msg) from exc


def _item(row: Any) -> Item:
    return Item(
        id=row.conf_item_id,
        value=row.conf_item_value,
        type=row.conf_item_type,
        version=row.conf_item_version,
    )


def _module(row: Any) -> Module:
    return Module(
        id=row.conf_module_id,
        value=row.conf_module_value,
        version=row.conf_module_version,
    )


def _item_module(row: Any) -> ItemModule:
    return ItemModule(
        id=row.conf_item_module_id,
        item_id=row.conf_item_id,
        module_id=row.conf_module_id,
    )


class GraphStore:
    """Encapsulates SQL for catalog management and closure reads."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Resolver read primitives
    # ------------------------------------------------------------------

    def dependees_of(self, module_id: int) -> set[int]:
        """Return the modules *module_id* directly depends on."""
        stmt = select(conf_module_dependency.c.dependee).where(
            conf_module_dependency.c.dependent == module_id
        )
        with _storage_errors("read module dependencies"), self._engine.connect() as conn:
            return {int(row.dependee) for row in conn.execute(stmt)}

    def items_of(self, module_id: int) -> set[Item]:
        """Return the items associated with *module_id*.

        Association rows whose item no longer exists are skipped by the join.
        """
        stmt = (
            select(conf_item)
            .join(conf_item_module, conf_item_module.c.conf_item_id == conf_item.c.conf_item_id)
            .where(conf_item_module.c.conf_module_id == module_id)
        )
        with _storage_errors("read module items"), self._engine.connect() as conn:
            return {_item(row) for row in conn.execute(stmt)}

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def create_item(self, value: str, item_type: str, version: str) -> int:
        stmt = insert(conf_item).values(
            conf_item_value=value,
            conf_item_type=item_type,
            conf_item_version=version,
        )
        with _storage_errors("insert item"), self._engine.begin() as conn:
            return int(conn.execute(stmt).inserted_primary_key[0])

    def get_item(self, item_id: int) -> Item | None:
        stmt = select(conf_item).where(conf_item.c.conf_item_id == item_id)
        with _storage_errors(f"get item with id {item_id}"), self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        return _item(row) if row is not None else None

    def list_items(self) -> list[Item]:
        stmt = select(conf_item).order_by(conf_item.c.conf_item_id)
        with _storage_errors("list items"), self._engine.connect() as conn:
            return [_item(row) for row in conn.execute(stmt)]

    def delete_item(self, item_id: int) -> int:
        """Delete an item; returns the number of rows affected."""
        stmt = delete(conf_item).where(conf_item.c.conf_item_id == item_id)
        with _storage_errors("delete item"), self._engine.begin() as conn:
            return int(conn.execute(stmt).rowcount)

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    def create_module(self, value: str, version: str) -> int:
        stmt = insert(conf_module).values(conf_module_value=value, conf_module_version=version)
        with _storage_errors("create module"), self._engine.begin() as conn:
            return int(conn.execute(stmt).inserted_primary_key[0])

    def get_module(self, module_id: int) -> Module | None:
        stmt = select(conf_module).where(conf_module.c.conf_module_id == module_id)
        with _storage_errors(f"get module with id {module_id}"), self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        return _module(row) if row is not None else None

    def list_modules(self) -> list[Module]:
        stmt = select(conf_module).order_by(conf_module.c.conf_module_id)
        with _storage_errors("list modules"), self._engine.connect() as conn:
            return [_module(row) for row in conn.execute(stmt)]

    def all_module_ids(self) -> list[int]:
        stmt = select(conf_module.c.conf_module_id).order_by(conf_module.c.conf_module_id)
        with _storage_errors("list modules"), self._engine.connect() as conn:
            return [int(row.conf_module_id) for row in conn.execute(stmt)]

    def delete_module(self, module_id: int) -> int:
        stmt = delete(conf_module).where(conf_module.c.conf_module_id == module_id)
        with _storage_errors("delete module"), self._engine.begin() as conn:
            return int(conn.execute(stmt).rowcount)

    # ------------------------------------------------------------------
    # Item-module associations
    # ------------------------------------------------------------------

    def create_item_module(self, item_id: int, module_id: int) -> int:
        stmt = insert(conf_item_module).values(conf_item_id=item_id, conf_module_id=module_id)
        with _storage_errors("create item module"), self._engine.begin() as conn:
            return int(conn.execute(stmt).inserted_primary_key[0])

    def get_item_module(self, item_module_id: int) -> ItemModule | None:
        stmt = select(conf_item_module).where(
            conf_item_module.c.conf_item_module_id == item_module_id
        )
        with (
            _storage_errors(f"get item module with id {item_module_id}"),
            self._engine.connect() as conn,
        ):
            row = conn.execute(stmt).first()
        return _item_module(row) if row is not None else None

    def list_item_modules(self) -> list[ItemModule]:
        stmt = select(conf_item_module).order_by(conf_item_module.c.conf_item_module_id)
        with _storage_errors("list item modules"), self._engine.connect() as conn:
            return [_item_module(row) for row in conn.execute(stmt)]

    def delete_item_module(self, item_module_id: int) -> int:
        stmt = delete(conf_item_module).where(
            conf_item_module.c.conf_item_module_id == item_module_id
        )
        with _storage_errors("delete item module"), self._engine.begin() as conn:
            return int(conn.execute(stmt).rowcount)

    # ------------------------------------------------------------------
    # Module dependencies
    # ------------------------------------------------------------------

    def create_module_dependency(self, dependent: int, dependee: int) -> ModuleDependency:
        """Insert a dependency edge. Self-loops are allowed; duplicates are not."""
        stmt = insert(conf_module_dependency).values(dependent=dependent, dependee=dependee)
        with _storage_errors("create module dependency"), self._engine.begin() as conn:
            conn.execute(stmt)
        return ModuleDependency(dependent=dependent, dependee=dependee)

    def list_module_dependencies(
        self,
        *,
        dependent: int | None = None,
        dependee: int | None = None,
    ) -> list[ModuleDependency]:
        """List dependency edges, optionally filtered by either endpoint."""
        stmt = select(conf_module_dependency).order_by(
            conf_module_dependency.c.dependent, conf_module_dependency.c.dependee
        )
        if dependent is not None:
            stmt = stmt.where(conf_module_dependency.c.dependent == dependent)
        if dependee is not None:
            stmt = stmt.where(conf_module_dependency.c.dependee == dependee)

        with _storage_errors("list module dependencies"), self._engine.connect() as conn:
            return [
                ModuleDependency(dependent=row.dependent, dependee=row.dependee)
                for row in conn.execute(stmt)
            ]

    def all_module_dependencies(self) -> list[ModuleDependency]:
        return self.list_module_dependencies()

    def delete_module_dependencies(
        self,
        *,
        dependent: int | None = None,
        dependee: int | None = None,
    ) -> int:
        """Delete edges matching either or both endpoints.

        Raises:
            ValueError: If neither endpoint is given.
        """
        conditions = []
        if dependent is not None:
            conditions.append(conf_module_dependency.c.dependent == dependent)
        if dependee is not None:
            conditions.append(conf_module_dependency.c.dependee == dependee)
        if not conditions:
            msg = "At least one of dependent or dependee is required"
            raise ValueError(msg)

        stmt = delete(conf_module_dependency).where(and_(*conditions))
        with _storage_errors("delete module dependency"), self._engine.begin() as conn:
            return int(conn.execute(stmt).rowcount)
