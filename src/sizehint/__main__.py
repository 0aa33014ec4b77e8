"""Allow ``python -m sizehint`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m sizehint`` behaves identically to the ``sizehint`` console
script.
"""

from __future__ import annotations

from sizehint.cli.app import cli

if __name__ == "__main__":
    cli()
