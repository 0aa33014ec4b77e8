"""Shared pytest fixtures and configuration for the sizehint test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests go through ``main(argv)`` and never spawn processes.
* Tests must not depend on whether Rich is installed unless they hide
  it explicitly.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def no_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail so plain-text output is produced."""
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
