"""Core layer — pure size-hint arithmetic and notation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from sizehint.core.models import EMPTY, UNBOUNDED, UNCONSTRAINED, SizeHint
from sizehint.core.notation import format_hint, parse_hint
from sizehint.core.protocols import HintProducer
from sizehint.core.size_hint import (
    and_,
    and_all,
    and_all_lazy,
    or_,
    or_all,
    or_all_lazy,
    recursion_guard,
)

__all__: list[str] = [
    "EMPTY",
    "UNBOUNDED",
    "UNCONSTRAINED",
    "HintProducer",
    "SizeHint",
    "and_",
    "and_all",
    "and_all_lazy",
    "format_hint",
    "or_",
    "or_all",
    "or_all_lazy",
    "parse_hint",
    "recursion_guard",
]
