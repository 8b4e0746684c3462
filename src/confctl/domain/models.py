"""Catalog entities: items, modules, and the edges between them.

All models are frozen so they can be members of sets. None of them are
mutated after creation; the catalog only inserts and deletes rows.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Item(BaseModel):
    """A concrete configuration artifact."""

    model_config = ConfigDict(frozen=True)

    id: int
    value: str
    type: str
    version: str


class Module(BaseModel):
    """A named, versioned grouping of items."""

    model_config = ConfigDict(frozen=True)

    id: int
    value: str
    version: str


class ItemModule(BaseModel):
    """Many-to-many association between an item and a module."""

    model_config = ConfigDict(frozen=True)

    id: int
    item_id: int
    module_id: int


class ModuleDependency(BaseModel):
    """Directed edge: *dependent* requires *dependee*."""

    model_config = ConfigDict(frozen=True)

    dependent: int
    dependee: int


class ModuleRef(BaseModel):
    """A module reference submitted in an install request.

    Only ``id`` is used. ``value`` and ``version`` are accepted so clients
    can echo back full module rows; any other keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(gt=0)
    value: StrictStr | None = None
    version: StrictStr | None = None
