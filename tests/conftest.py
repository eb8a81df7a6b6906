# tests/conftest.py
"""
Root conftest.

Every test runs against package defaults only: SOLID_CONFIG points at a
file that doesn't exist unless the test writes it. The global registry and
package logger are reset around each test.

Test Tiers:
- tier1: pure logic, no I/O
         Run: pytest -m tier1
- tier2: filesystem and CLI
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import logging

import pytest

from solid_principles.core import Transcript
from solid_principles.runtime import PrincipleRegistry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config at an empty temp location."""
    config_path = tmp_path / "solid-config.yaml"
    monkeypatch.setenv("SOLID_CONFIG", str(config_path))
    return config_path


@pytest.fixture(autouse=True)
def fresh_registry():
    PrincipleRegistry.reset_global()
    yield
    PrincipleRegistry.reset_global()


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("solid_principles")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def out() -> Transcript:
    """An empty transcript for driving examples directly."""
    return Transcript()
