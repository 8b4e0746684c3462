"""Tests for ConfSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from confctl.config.settings import ConfSettings


class TestConfSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ConfSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.database.url is None
        assert settings.insfile.format == "json"
        assert settings.insfile.include_modules is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ConfSettings.from_cli(root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "confctl.toml").write_text(
            '[database]\nurl = "sqlite:///x.db"\n[insfile]\nformat = "text"\n'
        )
        settings = ConfSettings.from_cli(root=tmp_path)
        assert settings.database.url == "sqlite:///x.db"
        assert settings.insfile.format == "text"
        assert settings.insfile.include_modules is False
        assert settings.config_path == tmp_path / "confctl.toml"

    def test_root_from_config_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "confctl.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = ConfSettings.from_cli()
        assert settings.root.resolve() == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[insfile]\ninclude_modules = true\n")
        settings = ConfSettings.from_cli(config_path=str(cfg), root=tmp_path)
        assert settings.insfile.include_modules is True

    def test_missing_explicit_config_ignored(self, tmp_path: Path) -> None:
        settings = ConfSettings.from_cli(config_path=str(tmp_path / "nope.toml"), root=tmp_path)
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "confctl.toml").write_text("[database\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ConfSettings.from_cli(root=tmp_path)

    def test_invalid_format_value(self, tmp_path: Path) -> None:
        (tmp_path / "confctl.toml").write_text('[insfile]\nformat = "xml"\n')
        with pytest.raises(ValidationError):
            ConfSettings.from_cli(root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "confctl.toml").write_text('[insfile]\nformat = "json"\n')
        monkeypatch.setenv("CONFCTL_INSFILE__FORMAT", "text")
        settings = ConfSettings.from_cli(root=tmp_path)
        assert settings.insfile.format == "text"

    def test_env_database_url(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFCTL_DATABASE__URL", "sqlite:///env.db")
        assert ConfSettings.from_cli(root=tmp_path).database.url == "sqlite:///env.db"

    def test_cli_flags_win(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFCTL_QUIET", "false")
        settings = ConfSettings.from_cli(root=tmp_path, quiet=True, json_output=True)
        assert settings.quiet is True
        assert settings.json_output is True
