"""Locate and read ``enrollctl.toml``.

Lookup order: ``$ENROLLCTL_CONFIG`` if set, otherwise the nearest
``enrollctl.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from enrollctl.config.models import EnrollConfig

CONFIG_FILENAME = "enrollctl.toml"
CONFIG_ENV_VAR = "ENROLLCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A set but dangling ``$ENROLLCTL_CONFIG`` disables the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Decode *path*; a syntax error is reported as a CLI error."""
    with path.open("rb") as fh:
        try:
            return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> EnrollConfig:
    """Validate the config at *path* (or the one found from *cwd*).

    No file means all defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return EnrollConfig()
    return EnrollConfig.model_validate(read_toml(path))
