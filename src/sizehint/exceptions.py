"""Custom exception hierarchy for sizehint.

The combinators in :mod:`sizehint.core.size_hint` are total and never
raise.  Errors only arise at the edges (parsing user-supplied hint
notation, running the command-line tool), and every one of them
inherits from :class:`SizeHintError` so the CLI error boundary can
render a clean message.

Hierarchy
---------
SizeHintError
├── InvalidHintError
├── InvalidDepthError
└── EnvironmentError
"""

from __future__ import annotations


class SizeHintError(Exception):
    """Base exception for all sizehint errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Notation --------------------------------------------------------------

class InvalidHintError(SizeHintError):
    """Raised when a textual size hint cannot be parsed."""


# --- CLI arguments ---------------------------------------------------------

class InvalidDepthError(SizeHintError):
    """Raised when a recursion depth argument is negative."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SizeHintError):
    """Raised when an optional runtime dependency is not available."""
