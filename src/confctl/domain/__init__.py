"""Domain layer — entity models, errors, and the dependency-closure core.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
