"""Allow ``python -m rung_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m rung_cli`` behaves identically to the ``rung``
console script.
"""

from __future__ import annotations

from rung_cli.cli.app import cli

if __name__ == "__main__":
    cli()
