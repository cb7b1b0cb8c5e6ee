"""Shared fixtures for modgraph tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def blueprint_manifest() -> Path:
    """Path to the plugin manifest used across CLI and loader tests."""
    return FIXTURES / "blueprint_assist.toml"
