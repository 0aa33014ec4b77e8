"""Numeric limits shared by the core and CLI layers."""

from __future__ import annotations

USIZE_MAX: int = 2**64 - 1
"""Largest unsigned machine-word value; saturating sums clamp here."""

MAX_DEPTH: int = 20
"""Deepest recursion level at which :func:`recursion_guard` still descends."""
