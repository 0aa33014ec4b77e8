"""Result rendering for the CLI layer.

Renders a two-column table of labelled values with Rich when it is
installed, and as aligned plain text on stderr otherwise.  No
arithmetic happens here; callers pass already formatted strings.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from sizehint.cli.console import console


def _print_plain_table(title: str, rows: Sequence[tuple[str, str]]) -> None:
    """Render *rows* without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 48, file=sys.stderr)
    print(f"{'Item':<16} {'Value':<30}", file=sys.stderr)
    print("-" * 48, file=sys.stderr)
    for label, value in rows:
        print(f"{label:<16} {value:<30}", file=sys.stderr)
    print(file=sys.stderr)


def render_table(title: str, rows: Sequence[tuple[str, str]]) -> None:
    """Display *rows* as a titled ``Item``/``Value`` table."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(title, rows)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Item", style="bold", min_width=12)
    table.add_column("Value", min_width=16)

    for label, value in rows:
        table.add_row(label, value)

    console.print()
    console.print(table)
    console.print()
