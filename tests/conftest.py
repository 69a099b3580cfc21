"""Pytest configuration and shared fixtures for jsonscope tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """Return a small document with objects nested three levels deep."""
    return {
        "name": "service",
        "settings": {
            "retries": 3,
            "endpoints": {"primary": "https://a.example", "backup": None},
        },
        "tags": ["alpha", "beta"],
    }


@pytest.fixture
def left_document() -> dict[str, Any]:
    """Return the left side of the x/y comparison scenario."""
    return {"x": 1, "y": 2}


@pytest.fixture
def right_document() -> dict[str, Any]:
    """Return the right side of the x/y comparison scenario."""
    return {"x": 1, "y": 3}


@pytest.fixture
def json_file(tmp_path: Path) -> Path:
    """Create a JSON5 source file."""
    path = tmp_path / "settings.json5"
    path.write_text("{\n  // comment\n  name: 'demo',\n  debug: False,\n}\n", encoding="utf-8")
    return path


@pytest.fixture
def toml_file(tmp_path: Path) -> Path:
    """Create a TOML source file."""
    path = tmp_path / "config.toml"
    path.write_text('title = "demo"\n\n[owner]\nname = "Tom"\n', encoding="utf-8")
    return path
