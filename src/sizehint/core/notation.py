"""Textual notation for size hints.

Grammar (whitespace around tokens is ignored)::

    hint   := bound | bound ".." | bound ".." bound
    bound  := DIGITS | "max"

``N`` means exactly ``N`` units, ``N..M`` between ``N`` and ``M``, and
``N..`` at least ``N`` with no known maximum.  ``max`` stands for
:data:`~sizehint.utils.constants.USIZE_MAX`.

:func:`format_hint` is the inverse of :func:`parse_hint` for every
well-formed hint.
"""

from __future__ import annotations

from sizehint.core.models import SizeHint
from sizehint.exceptions import InvalidHintError
from sizehint.utils.constants import USIZE_MAX

_RANGE_SEPARATOR = ".."
_MAX_TOKEN = "max"
_SYNTAX_HINT = "Use N, N..M or N.. (e.g. 4, 2..8, 1..); 'max' is accepted as a bound."


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _parse_bound(token: str, text: str) -> int:
    """Convert a single bound token to an integer in ``[0, USIZE_MAX]``."""
    token = token.strip()
    if token.lower() == _MAX_TOKEN:
        return USIZE_MAX
    if not (token.isascii() and token.isdigit()):
        raise InvalidHintError(
            f"Invalid size hint: {text!r}",
            hint=_SYNTAX_HINT,
        )
    value = int(token)
    if value > USIZE_MAX:
        raise InvalidHintError(
            f"Bound {token} in {text!r} exceeds the maximum {USIZE_MAX}.",
            hint="Use 'max' for the largest representable bound.",
        )
    return value


def parse_hint(text: str) -> SizeHint:
    """Parse *text* into a ``(lower, upper)`` size hint.

    Raises
    ------
    InvalidHintError
        If *text* is empty, malformed, out of range, or has an upper
        bound below its lower bound.
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidHintError("Size hint must not be empty.", hint=_SYNTAX_HINT)

    if _RANGE_SEPARATOR not in stripped:
        exact = _parse_bound(stripped, text)
        return (exact, exact)

    lower_token, _, upper_token = stripped.partition(_RANGE_SEPARATOR)
    lower = _parse_bound(lower_token, text)
    if not upper_token.strip():
        return (lower, None)

    upper = _parse_bound(upper_token, text)
    if upper < lower:
        raise InvalidHintError(
            f"Upper bound {upper} is below lower bound {lower} in {text!r}.",
            hint="Write the smaller bound first.",
        )
    return (lower, upper)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _format_bound(value: int) -> str:
    return _MAX_TOKEN if value >= USIZE_MAX else str(value)


def format_hint(hint: SizeHint) -> str:
    """Render *hint* in the notation accepted by :func:`parse_hint`."""
    lower, upper = hint
    if upper is None:
        return f"{_format_bound(lower)}{_RANGE_SEPARATOR}"
    if upper == lower:
        return _format_bound(lower)
    return f"{_format_bound(lower)}{_RANGE_SEPARATOR}{_format_bound(upper)}"
