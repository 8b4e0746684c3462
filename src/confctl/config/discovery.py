"""Locating ``confctl.toml``.

A catalog root is the directory holding ``confctl.toml``. Commands run
from any subdirectory of it find the file the way git finds ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "confctl.toml"
CONFIG_ENV_VAR = "CONFCTL_CONFIG"


def locate_config(explicit: str | Path | None = None, *, start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None.

    Precedence: *explicit* (the ``--config`` flag), then ``CONFCTL_CONFIG``,
    then the nearest ``confctl.toml`` in *start* (default: cwd) or above.
    A named file that does not exist yields None; discovery is skipped.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
