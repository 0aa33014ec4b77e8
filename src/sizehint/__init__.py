"""sizehint — combinators for ``(lower, upper)`` input size hints.

Pure arithmetic helpers used by property-based input generators to
compose per-field and per-variant size estimates into whole-type ones.
"""

from sizehint.core.models import EMPTY, UNBOUNDED, UNCONSTRAINED, SizeHint
from sizehint.core.size_hint import (
    and_,
    and_all,
    and_all_lazy,
    or_,
    or_all,
    or_all_lazy,
    recursion_guard,
)
from sizehint.utils.constants import MAX_DEPTH, USIZE_MAX
from sizehint.version import __version__

__all__: list[str] = [
    "EMPTY",
    "MAX_DEPTH",
    "UNBOUNDED",
    "UNCONSTRAINED",
    "USIZE_MAX",
    "SizeHint",
    "__version__",
    "and_",
    "and_all",
    "and_all_lazy",
    "or_",
    "or_all",
    "or_all_lazy",
    "recursion_guard",
]
