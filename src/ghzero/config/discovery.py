"""Locate the ghz.toml that applies to the current invocation.

Lookup order:
  1. ``GHZ_CONFIG`` (an explicit file; a missing file means no config)
  2. ``ghz.toml`` in the start directory or any parent, like git finds .git/
  3. the user config, ``$XDG_CONFIG_HOME/ghz/ghz.toml`` (default ``~/.config``)

``--config`` bypasses discovery entirely; see :meth:`GhzSettings.from_cli`.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "ghz.toml"
CONFIG_ENV_VAR = "GHZ_CONFIG"


def user_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "ghz" / CONFIG_FILENAME


def _project_candidates(start: Path) -> Iterator[Path]:
    directory = start.resolve()
    yield directory / CONFIG_FILENAME
    for parent in directory.parents:
        yield parent / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    for candidate in _project_candidates(start or Path.cwd()):
        if candidate.is_file():
            return candidate

    user = user_config_path()
    return user if user.is_file() else None
