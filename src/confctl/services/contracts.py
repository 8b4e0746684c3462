"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer, so a renamed key fails fast in tests instead of in the
wire formatter.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class InstallItem(BaseModel):
    """One item row in an install result."""

    id: int
    value: str
    type: str
    version: str


class InstallModule(BaseModel):
    """One closure module in an install result."""

    id: int


class InstallResultData(BaseModel):
    """Payload contract for ``InstallService.insfile``.

    ``modules`` is None when module inclusion was not requested, and a
    (possibly empty) list when it was.
    """

    roots: list[int]
    items: list[InstallItem]
    modules: list[InstallModule] | None = None


class DependencyCheckData(BaseModel):
    """Payload contract for ``DependencyService.check``."""

    modules: int
    edges: int
    cycles: list[list[int]]
    self_loops: list[int]
    dangling: list[dict[str, int]]
    acyclic: bool
