"""Repositories encapsulating SQL access to the catalog."""

from confctl.infrastructure.repositories.graph_store import GraphStore

__all__ = ["GraphStore"]
