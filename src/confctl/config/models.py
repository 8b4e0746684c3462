"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, confctl.toml only contains
overrides. A fresh catalog needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

# --- confctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section.

    ``url`` is any SQLAlchemy URL. When unset, the catalog uses a SQLite
    file at ``{root}/.confctl/confctl.db``.
    """

    model_config = {"frozen": True}

    url: str | None = None
    echo: bool = False


class InsfileConfig(BaseModel):
    """[insfile] section — defaults for the install-file response shape."""

    model_config = {"frozen": True}

    format: Literal["json", "text"] = "json"
    include_modules: bool = False

