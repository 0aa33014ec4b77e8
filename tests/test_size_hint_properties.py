"""Property-based tests for the algebraic laws of the combinators.

Bounds are drawn both from small values and from the neighbourhood of
``USIZE_MAX`` so that saturation is exercised as often as plain sums.
"""

from __future__ import annotations

from functools import reduce

from hypothesis import given
from hypothesis import strategies as st

from sizehint import (
    EMPTY,
    MAX_DEPTH,
    UNBOUNDED,
    UNCONSTRAINED,
    USIZE_MAX,
    and_,
    and_all,
    and_all_lazy,
    or_,
    or_all,
    or_all_lazy,
)
from sizehint.core.models import SizeHint


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def bounds() -> st.SearchStrategy[int]:
    """Small bounds mixed with bounds close to ``USIZE_MAX``."""
    return st.one_of(
        st.integers(min_value=0, max_value=1_000),
        st.integers(min_value=USIZE_MAX - 1_000, max_value=USIZE_MAX),
    )


def size_hints() -> st.SearchStrategy[SizeHint]:
    """Hints with ``upper >= lower`` or no upper bound."""
    return bounds().flatmap(
        lambda lower: st.tuples(
            st.just(lower),
            st.none() | st.integers(min_value=lower, max_value=USIZE_MAX),
        )
    )


hint_lists = st.lists(size_hints(), max_size=8)
depths = st.integers(min_value=0, max_value=MAX_DEPTH + 5)


class _Counter:
    def __init__(self, hint: SizeHint) -> None:
        self.hint = hint
        self.calls = 0

    def __call__(self, depth: int) -> SizeHint:
        self.calls += 1
        return self.hint


# ---------------------------------------------------------------------------
# and_
# ---------------------------------------------------------------------------

class TestAndLaws:
    @given(size_hints(), size_hints())
    def test_commutative(self, a: SizeHint, b: SizeHint) -> None:
        assert and_(a, b) == and_(b, a)

    @given(size_hints(), size_hints(), size_hints())
    def test_associative(self, a: SizeHint, b: SizeHint, c: SizeHint) -> None:
        assert and_(and_(a, b), c) == and_(a, and_(b, c))

    @given(size_hints())
    def test_identity(self, a: SizeHint) -> None:
        assert and_(EMPTY, a) == a
        assert and_(a, EMPTY) == a

    @given(size_hints())
    def test_unbounded_is_absorbing(self, a: SizeHint) -> None:
        assert and_(UNBOUNDED, a) == UNBOUNDED

    @given(size_hints(), size_hints())
    def test_never_exceeds_usize_max(self, a: SizeHint, b: SizeHint) -> None:
        lower, upper = and_(a, b)
        assert lower <= USIZE_MAX
        assert upper is None or upper <= USIZE_MAX


# ---------------------------------------------------------------------------
# or_
# ---------------------------------------------------------------------------

class TestOrLaws:
    @given(size_hints(), size_hints())
    def test_commutative(self, a: SizeHint, b: SizeHint) -> None:
        assert or_(a, b) == or_(b, a)

    @given(size_hints(), size_hints(), size_hints())
    def test_associative(self, a: SizeHint, b: SizeHint, c: SizeHint) -> None:
        assert or_(or_(a, b), c) == or_(a, or_(b, c))

    @given(size_hints())
    def test_idempotent(self, a: SizeHint) -> None:
        assert or_(a, a) == a

    @given(size_hints())
    def test_unconstrained_is_absorbing(self, a: SizeHint) -> None:
        assert or_(UNCONSTRAINED, a) == UNCONSTRAINED


# ---------------------------------------------------------------------------
# Folds
# ---------------------------------------------------------------------------

class TestFolds:
    @given(hint_lists)
    def test_and_all_is_left_fold(self, hints: list[SizeHint]) -> None:
        assert and_all(hints) == reduce(and_, hints, EMPTY)

    @given(st.data(), hint_lists)
    def test_and_all_order_independent(
        self, data: st.DataObject, hints: list[SizeHint],
    ) -> None:
        shuffled = data.draw(st.permutations(hints))
        assert and_all(shuffled) == and_all(hints)

    @given(st.data(), hint_lists)
    def test_or_all_order_independent(
        self, data: st.DataObject, hints: list[SizeHint],
    ) -> None:
        shuffled = data.draw(st.permutations(hints))
        assert or_all(shuffled) == or_all(hints)

    @given(hint_lists, depths)
    def test_and_all_lazy_matches_eager(self, hints: list[SizeHint], depth: int) -> None:
        assert and_all_lazy([_Counter(h) for h in hints], depth) == and_all(hints)

    @given(hint_lists, depths)
    def test_or_all_lazy_matches_eager(self, hints: list[SizeHint], depth: int) -> None:
        assert or_all_lazy([_Counter(h) for h in hints], depth) == or_all(hints)


# ---------------------------------------------------------------------------
# Short-circuiting
# ---------------------------------------------------------------------------

class TestShortCircuit:
    @given(hint_lists, hint_lists, depths)
    def test_and_all_lazy_skips_after_fixed_point(
        self, prefix: list[SizeHint], suffix: list[SizeHint], depth: int,
    ) -> None:
        tail = [_Counter(h) for h in suffix]
        producers = [_Counter(h) for h in prefix] + [_Counter(UNBOUNDED)] + tail

        assert and_all_lazy(producers, depth) == UNBOUNDED
        assert all(counter.calls == 0 for counter in tail)

    @given(hint_lists, hint_lists, depths)
    def test_or_all_lazy_skips_after_fixed_point(
        self, prefix: list[SizeHint], suffix: list[SizeHint], depth: int,
    ) -> None:
        tail = [_Counter(h) for h in suffix]
        producers = [_Counter(h) for h in prefix] + [_Counter(UNCONSTRAINED)] + tail

        assert or_all_lazy(producers, depth) == UNCONSTRAINED
        assert all(counter.calls == 0 for counter in tail)

    @given(hint_lists, depths)
    def test_each_producer_called_at_most_once(
        self, hints: list[SizeHint], depth: int,
    ) -> None:
        producers = [_Counter(h) for h in hints]
        and_all_lazy(producers, depth)
        assert all(counter.calls <= 1 for counter in producers)
