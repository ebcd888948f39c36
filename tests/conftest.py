"""Shared pytest fixtures and test helpers for enrollctl tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from uuid import UUID

import pytest
from click.testing import CliRunner

ALICE_ID = UUID("00000000-0000-4000-8000-000000000001")
CUSTOMER_ID = UUID("00000000-0000-4000-8000-0000000000c1")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so no
    ``enrollctl.toml`` above the checkout leaks into a test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENROLLCTL_CONFIG", raising=False)


@pytest.fixture
def basic_user_data() -> dict[str, Any]:
    return {
        "role": "basic",
        "id": str(ALICE_ID),
        "email": "alice@example.com",
        "username": "alice",
        "customer_id": str(CUSTOMER_ID),
    }


@pytest.fixture
def customer_admin_data() -> dict[str, Any]:
    return {
        "role": "customer_admin",
        "id": str(ALICE_ID),
        "email": "carol@example.com",
        "username": "carol",
        "admin_privileges": ["Special", "Basic"],
        "customer_id": str(CUSTOMER_ID),
    }


@pytest.fixture
def system_admin_data() -> dict[str, Any]:
    return {
        "role": "system_admin",
        "id": str(ALICE_ID),
        "email": "root@example.com",
        "username": "root",
        "admin_privileges": ["Special", "Basic"],
        "nuclear_secret": "launch-code-0000",
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Factory: write *data* as JSON to ``tmp_path / name`` and return the path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
