"""Protocols consumed by the core layer.

Lazy folds and the recursion guard accept *producers* rather than
ready-made hints so that expensive or self-referential computations
only run when their result can still matter.
"""

from __future__ import annotations

from typing import Protocol

from sizehint.core.models import SizeHint


class HintProducer(Protocol):
    """Anything callable as ``producer(depth) -> SizeHint``.

    Plain functions, lambdas, bound methods and ``functools.partial``
    objects all satisfy this protocol structurally.
    """

    def __call__(self, depth: int) -> SizeHint:
        """Compute a size hint at the given recursion *depth*."""
        ...  # pragma: no cover
