"""Size-hint value type and its well-known constants.

A size hint is a plain ``(lower, upper)`` tuple: an immutable value
with no behaviour.  Callers build them inline (``(2, 2)``, ``(0, None)``)
and every combinator accepts and returns that shape.
"""

from __future__ import annotations

from sizehint.utils.constants import USIZE_MAX

SizeHint = tuple[int, int | None]
"""``(lower, upper)`` — ``upper`` is ``None`` when no maximum is known."""


# ---------------------------------------------------------------------------
# Distinguished values
# ---------------------------------------------------------------------------

EMPTY: SizeHint = (0, 0)
"""Consumes nothing.  Identity of :func:`~sizehint.core.size_hint.and_`."""

UNBOUNDED: SizeHint = (USIZE_MAX, None)
"""Saturated, no known maximum.  Absorbing for ``and_``."""

UNCONSTRAINED: SizeHint = (0, None)
"""Zero floor, no ceiling.  Absorbing for ``or_``."""
