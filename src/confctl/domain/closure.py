"""Dependency closure and item aggregation.

Given a set of root modules, the closure is every module reachable by
following ``dependent -> dependee`` edges outward, roots included. The
dependency graph is not guaranteed to be acyclic; the visited set is the
only thing that guarantees termination.

Both functions read through a :class:`GraphReader` and keep all state
local to the call, so concurrent requests never share mutable data.
Reader errors propagate unchanged and abort the traversal.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from confctl.domain.models import Item


class GraphReader(Protocol):
    """Read primitives the resolver needs from the graph store."""

    def dependees_of(self, module_id: int) -> set[int]:
        """Return the direct dependees of *module_id* (empty if none)."""
        ...

    def items_of(self, module_id: int) -> set[Item]:
        """Return the items associated with *module_id* (empty if none)."""
        ...


class Installation(BaseModel):
    """Aggregated result of a closure: items and, optionally, modules.

    ``modules`` is None when module inclusion was not requested.
    """

    model_config = ConfigDict(frozen=True)

    items: frozenset[Item]
    modules: frozenset[int] | None = None


def resolve_closure(reader: GraphReader, roots: Iterable[int]) -> frozenset[int]:
    """Return every module reachable from *roots*, including the roots.

    Unknown modules behave like modules with no dependees. An empty
    *roots* yields an empty closure.
    """
    visited: set[int] = set(roots)
    queue: deque[int] = deque(sorted(visited))

    while queue:
        module_id = queue.popleft()
        for dependee in sorted(reader.dependees_of(module_id)):
            if dependee not in visited:
                visited.add(dependee)
                queue.append(dependee)

    return frozenset(visited)


def aggregate(
    reader: GraphReader,
    roots: Iterable[int],
    *,
    include_modules: bool = False,
) -> Installation:
    """Collect the items of every module in the closure of *roots*.

    Items are deduplicated by ``value``: two rows carrying the same
    configuration value appear once. The first row seen wins, visiting
    modules in ascending id order and each module's items by ascending id.
    """
    closure = resolve_closure(reader, roots)

    by_value: dict[str, Item] = {}
    for module_id in sorted(closure):
        for item in sorted(reader.items_of(module_id), key=lambda i: i.id):
            by_value.setdefault(item.value, item)

    return Installation(
        items=frozenset(by_value.values()),
        modules=closure if include_modules else None,
    )
