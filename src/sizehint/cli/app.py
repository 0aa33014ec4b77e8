"""CLI application entry point and command routing for sizehint.

This module is the **sole error boundary** for the entire application.
It catches :class:`~sizehint.exceptions.SizeHintError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No arithmetic lives here; all work is delegated to the core layer.
* Output goes through :mod:`sizehint.cli.console` and
  :mod:`sizehint.cli.render` only.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sizehint.cli import exit_codes
from sizehint.cli.console import console
from sizehint.cli.render import render_table
from sizehint.core.models import SizeHint
from sizehint.core.notation import format_hint, parse_hint
from sizehint.core.size_hint import (
    and_all,
    and_all_lazy,
    or_all,
    or_all_lazy,
    recursion_guard,
)
from sizehint.exceptions import InvalidDepthError, InvalidHintError, SizeHintError
from sizehint.version import __version__

COMMANDS: tuple[str, ...] = ("and", "or", "and-lazy", "or-lazy", "guard")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``sizehint and|or HINT...``            — eager folds
    * ``sizehint and-lazy|or-lazy HINT...``  — short-circuiting folds
    * ``sizehint guard HINT --depth N``      — recursion guard
    * ``sizehint --version``
    """
    parser = argparse.ArgumentParser(
        prog="sizehint",
        description="Combine (lower, upper) input size hints.",
        epilog="Hint notation: N, N..M or N.. ('max' is accepted as a bound).",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=COMMANDS,
        help="Combinator to apply.",
    )
    parser.add_argument(
        "hints",
        nargs="*",
        default=[],
        metavar="HINT",
        help="Size hints to combine.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=0,
        help="Recursion depth passed to lazy folds and the guard (default: 0).",
    )
    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _CountingProducer:
    """Constant hint producer that records how often it was called."""

    def __init__(self, hint: SizeHint) -> None:
        self.hint: SizeHint = hint
        self.calls: int = 0

    def __call__(self, depth: int) -> SizeHint:
        self.calls += 1
        return self.hint


def _validate_depth(depth: int) -> int:
    if depth < 0:
        raise InvalidDepthError(
            f"Depth must not be negative: {depth}",
            hint="Recursion depth starts at 0.",
        )
    return depth


def _input_rows(hints: Sequence[SizeHint]) -> list[tuple[str, str]]:
    return [(f"input {i}", format_hint(hint)) for i, hint in enumerate(hints, start=1)]


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_fold(command: str, hints: list[SizeHint]) -> int:
    """Run an eager ``and``/``or`` fold and render the result."""
    result = and_all(hints) if command == "and" else or_all(hints)
    rows = _input_rows(hints)
    rows.append(("result", format_hint(result)))
    render_table(f"sizehint {command}", rows)
    return exit_codes.SUCCESS


def _handle_lazy_fold(command: str, hints: list[SizeHint], depth: int) -> int:
    """Run a lazy fold and report how many producers were evaluated."""
    producers = [_CountingProducer(hint) for hint in hints]
    fold = and_all_lazy if command == "and-lazy" else or_all_lazy
    result = fold(producers, depth)
    evaluated = sum(1 for producer in producers if producer.calls)

    rows = _input_rows(hints)
    rows.append(("depth", str(depth)))
    rows.append(("evaluated", f"{evaluated} of {len(producers)}"))
    rows.append(("result", format_hint(result)))
    render_table(f"sizehint {command}", rows)
    return exit_codes.SUCCESS


def _handle_guard(hints: list[SizeHint], depth: int) -> int:
    """Apply the recursion guard to a single constant producer."""
    if len(hints) != 1:
        raise InvalidHintError(
            f"guard takes exactly one hint, got {len(hints)}.",
            hint="Example: sizehint guard 2..8 --depth 5",
        )
    producer = _CountingProducer(hints[0])
    result = recursion_guard(depth, producer)

    rows = _input_rows(hints)
    rows.append(("depth", str(depth)))
    rows.append(("producer ran", "yes" if producer.calls else "no"))
    rows.append(("result", format_hint(result)))
    render_table("sizehint guard", rows)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the sizehint CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    command: str = args.command
    hints = [parse_hint(text) for text in args.hints]
    depth = _validate_depth(args.depth)

    if command == "guard":
        return _handle_guard(hints, depth)
    if command.endswith("-lazy"):
        return _handle_lazy_fold(command, hints, depth)
    return _handle_fold(command, hints)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except SizeHintError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
