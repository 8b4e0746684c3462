"""Shared pytest fixtures and test helpers for confctl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from confctl.config.settings import ConfSettings
from confctl.domain.models import Item
from confctl.infrastructure.catalog import Catalog
from confctl.infrastructure.database.engine import create_db_engine, create_schema
from confctl.infrastructure.repositories.graph_store import GraphStore
from confctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host CONFCTL_* variables out of settings resolution."""
    monkeypatch.delenv("CONFCTL_CONFIG", raising=False)
    monkeypatch.delenv("CONFCTL_ROOT", raising=False)
    monkeypatch.delenv("CONFCTL_DATABASE__URL", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo root-logger changes made by configure_logging during CLI runs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tuned = [logging.getLogger(name) for name in ("confctl", "sqlalchemy.engine")]
    tuned_levels = [logger.level for logger in tuned]
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for logger, level in zip(tuned, tuned_levels, strict=True):
        logger.setLevel(level)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Iterator[None]:
    """Keep --verbose telemetry from leaking between tests."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    create_schema(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(db_engine: Engine) -> GraphStore:
    """Graph store over the temporary database."""
    return GraphStore(db_engine)


@pytest.fixture
def catalog(tmp_path: Path) -> Iterator[Catalog]:
    """Fully initialized catalog on a temp directory."""
    settings = ConfSettings.from_cli(root=tmp_path)
    c = Catalog(settings)
    try:
        yield c
    finally:
        c.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated catalog.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_item(item_id: int, value: str, **kwargs: Any) -> Item:
    """Build an Item with throwaway type/version defaults."""
    return Item(
        id=item_id,
        value=value,
        type=kwargs.get("type", "file"),
        version=kwargs.get("version", "1.0"),
    )


class DictGraphReader:
    """In-memory GraphReader that records every read.

    *edges* maps a module to its dependees; *items* maps a module to its
    items. Modules missing from either mapping read as empty.
    """

    def __init__(
        self,
        edges: dict[int, set[int]] | None = None,
        items: dict[int, set[Item]] | None = None,
    ) -> None:
        self.edges = edges or {}
        self.items = items or {}
        self.dependee_calls: list[int] = []
        self.item_calls: list[int] = []

    def dependees_of(self, module_id: int) -> set[int]:
        self.dependee_calls.append(module_id)
        return set(self.edges.get(module_id, set()))

    def items_of(self, module_id: int) -> set[Item]:
        self.item_calls.append(module_id)
        return set(self.items.get(module_id, set()))


def seed_module(store: GraphStore, value: str, *item_values: str) -> int:
    """Create a module and one item per value attached to it; return the module id."""
    module_id = store.create_module(value, "1.0")
    for item_value in item_values:
        item_id = store.create_item(item_value, "file", "1.0")
        store.create_item_module(item_id, module_id)
    return module_id
