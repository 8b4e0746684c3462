"""Tests for InitService."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from confctl.config.settings import ConfSettings
from confctl.domain.errors import StorageUnavailableError
from confctl.infrastructure.catalog import Catalog
from confctl.services.init import InitService


class TestInitService:
    def test_reports_location(self, catalog: Catalog) -> None:
        result = InitService(catalog).init()
        assert result.ok
        assert result.data["root"] == str(catalog.root)
        assert result.data["database"].endswith("confctl.db")

    def test_idempotent(self, catalog: Catalog) -> None:
        assert InitService(catalog).init().ok
        assert InitService(catalog).init().ok

    def test_storage_failure(self) -> None:
        catalog = MagicMock()
        catalog.ensure_schema.side_effect = StorageUnavailableError("read-only")
        result = InitService(catalog).init()
        assert result.error is not None
        assert result.error.code == "STORAGE_UNAVAILABLE"

    def test_uncreatable_data_dir(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        catalog = Catalog(ConfSettings.from_cli(root=blocker / "catalog"))
        try:
            result = InitService(catalog).init()
        finally:
            catalog.close()
        assert result.error is not None
        assert result.error.code == "STORAGE_UNAVAILABLE"
        assert "blocker" not in result.error.message
