"""DependencyService — whole-graph diagnostics over module dependencies.

Cycles are legal in the catalog and the closure resolver tolerates them;
this report only makes them visible. Uses ``self._catalog.graph.graph``
(triggers lazy build).
"""

from __future__ import annotations

import networkx as nx

from confctl.domain.errors import StorageUnavailableError
from confctl.services.base import BaseService
from confctl.services.contracts import DependencyCheckData, dump_validated
from confctl.services.result import ServiceResult
from confctl.services.telemetry import trace_span, traced


class DependencyService(BaseService):
    """Reports cycles, self-loops, and dangling dependency edges."""

    @traced
    def check(self) -> ServiceResult:
        op = "dependency_check"
        try:
            with trace_span("build_graph") as span:
                g = self._catalog.graph.graph
                if span:
                    span.annotate(nodes=g.number_of_nodes(), edges=g.number_of_edges())
        except StorageUnavailableError as exc:
            return self._storage_failure(op, exc)

        self_loops = sorted(u for u, _ in nx.selfloop_edges(g))

        # Self-loops are reported separately.
        cycles: list[list[int]] = []
        for cycle in nx.simple_cycles(g):
            if len(cycle) > 1:
                start = cycle.index(min(cycle))
                cycles.append(cycle[start:] + cycle[:start])
        cycles.sort()

        unknown = {n for n, known in g.nodes(data="known") if not known}
        dangling = [
            {"dependent": u, "dependee": v}
            for u, v in sorted(g.edges())
            if u in unknown or v in unknown
        ]

        warnings = [f"Dependency cycle: {' -> '.join(map(str, c + c[:1]))}" for c in cycles]

        data = dump_validated(
            DependencyCheckData,
            {
                "modules": g.number_of_nodes() - len(unknown),
                "edges": g.number_of_edges(),
                "cycles": cycles,
                "self_loops": self_loops,
                "dangling": dangling,
                "acyclic": not cycles and not self_loops,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
