"""Single source of truth for the sizehint package version."""

from __future__ import annotations

__version__: str = "0.1.0"
