"""GraphEngine — lazy-built NetworkX graph of module dependencies.

Used for whole-graph diagnostics (cycles, dangling edges). The install
path never builds it: closure resolution walks the store one module at
a time instead. Rebuilt per catalog instance, no cross-invocation cache.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from confctl.infrastructure.repositories.graph_store import GraphStore

_Graph: TypeAlias = nx.DiGraph


class GraphEngine:
    """Lazy-loading dependency graph backed by the graph store."""

    def __init__(self, store: GraphStore) -> None:
        self._store = store
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building from the store on first access."""
        if self._graph is None:
            self._graph = self._build_from_store()
        return self._graph

    def invalidate(self) -> None:
        """Clear the cached graph, forcing rebuild on next access."""
        self._graph = None

    def _build_from_store(self) -> _Graph:
        """Build a DiGraph with one node per module and one edge per dependency.

        Modules are added first so isolated modules are visible. Edges whose
        endpoints are not modules add nodes flagged ``known=False``.
        """
        g: _Graph = nx.DiGraph()
        for module_id in self._store.all_module_ids():
            g.add_node(module_id, known=True)

        for dep in self._store.all_module_dependencies():
            for endpoint in (dep.dependent, dep.dependee):
                if endpoint not in g:
                    g.add_node(endpoint, known=False)
            g.add_edge(dep.dependent, dep.dependee)
        return g
