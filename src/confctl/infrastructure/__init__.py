"""Infrastructure layer — database, graph store, dependency graph engine.

This layer depends on stdlib and third-party libs (SQLAlchemy, NetworkX).
It may import domain models and errors, but never services, commands,
or output.
"""
