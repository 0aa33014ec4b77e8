"""Combinators for ``(lower, upper)`` size hints.

Every function in this module is **pure** and **total**: no I/O, no
shared state, and no exceptions.  Integer overflow cannot happen in
Python, so sums are clamped to :data:`~sizehint.utils.constants.USIZE_MAX`
explicitly to keep the saturating semantics callers rely on.

Two families are provided:

* **and** — sequential consumption ("this, then that").  Bounds add.
* **or** — alternative consumption ("this, or that").  The cheapest
  alternative sets the floor, the most expensive the ceiling.

The ``*_lazy`` folds take :class:`~sizehint.core.protocols.HintProducer`
callables and stop invoking them once the running result can no longer
change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from sizehint.core.models import EMPTY, UNBOUNDED, UNCONSTRAINED, SizeHint
from sizehint.core.protocols import HintProducer
from sizehint.utils.constants import MAX_DEPTH, USIZE_MAX


# ---------------------------------------------------------------------------
# Arithmetic primitives
# ---------------------------------------------------------------------------

def _saturating_add(lhs: int, rhs: int) -> int:
    return min(lhs + rhs, USIZE_MAX)


# ---------------------------------------------------------------------------
# Recursion guard
# ---------------------------------------------------------------------------

def recursion_guard(depth: int, f: HintProducer) -> SizeHint:
    """Protect against unbounded recursion through self-referential types.

    While *depth* is at most :data:`MAX_DEPTH`, returns ``f(depth + 1)``.
    Past that limit *f* is not called and :data:`UNBOUNDED` is returned:
    the value could consume anything.
    """
    if depth > MAX_DEPTH:
        return UNBOUNDED
    return f(depth + 1)


# ---------------------------------------------------------------------------
# Sequential composition
# ---------------------------------------------------------------------------

def and_(lhs: SizeHint, rhs: SizeHint) -> SizeHint:
    """Take the sum of the *lhs* and *rhs* size hints.

    The upper bound survives only when both sides have one.
    """
    lower = _saturating_add(lhs[0], rhs[0])
    if lhs[1] is None or rhs[1] is None:
        return (lower, None)
    return (lower, _saturating_add(lhs[1], rhs[1]))


def and_all(hints: Iterable[SizeHint]) -> SizeHint:
    """Take the sum of all *hints*.

    Returns :data:`EMPTY`, the size of consuming nothing, when *hints*
    is empty.
    """
    acc = EMPTY
    for hint in hints:
        acc = and_(acc, hint)
    return acc


def and_all_lazy(hints: Iterable[HintProducer], depth: int) -> SizeHint:
    """Lazy variant of :func:`and_all`.

    Each producer is called with *depth*, left to right.  Once the sum
    saturates to :data:`UNBOUNDED` the remaining producers are skipped.
    """
    return _fold_lazy(and_, EMPTY, UNBOUNDED, hints, depth)


# ---------------------------------------------------------------------------
# Alternative composition
# ---------------------------------------------------------------------------

def or_(lhs: SizeHint, rhs: SizeHint) -> SizeHint:
    """Take the minimum of the lower bounds and maximum of the upper bounds.

    The upper bound survives only when both sides have one.
    """
    lower = min(lhs[0], rhs[0])
    if lhs[1] is None or rhs[1] is None:
        return (lower, None)
    return (lower, max(lhs[1], rhs[1]))


def or_all(hints: Iterable[SizeHint]) -> SizeHint:
    """Combine all *hints* as alternatives.

    The first hint seeds the fold, so a single hint comes back
    unchanged.  Returns :data:`EMPTY` when *hints* is empty.
    """
    iterator = iter(hints)
    acc = next(iterator, None)
    if acc is None:
        return EMPTY
    for hint in iterator:
        acc = or_(acc, hint)
    return acc


def or_all_lazy(hints: Iterable[HintProducer], depth: int) -> SizeHint:
    """Lazy variant of :func:`or_all`.

    The first producer seeds the fold.  Once the result reaches
    :data:`UNCONSTRAINED` the remaining producers are skipped.
    """
    iterator = iter(hints)
    first = next(iterator, None)
    if first is None:
        return EMPTY
    return _fold_lazy(or_, first(depth), UNCONSTRAINED, iterator, depth)


# ---------------------------------------------------------------------------
# Shared short-circuiting fold
# ---------------------------------------------------------------------------

def _fold_lazy(
    combine: Callable[[SizeHint, SizeHint], SizeHint],
    acc: SizeHint,
    absorbing: SizeHint,
    hints: Iterable[HintProducer],
    depth: int,
) -> SizeHint:
    """Fold producers with *combine* until *acc* equals *absorbing*."""
    for producer in hints:
        if acc == absorbing:
            break
        acc = combine(acc, producer(depth))
    return acc
