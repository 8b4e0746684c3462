"""Lazy-built NetworkX view of the module dependency graph."""
