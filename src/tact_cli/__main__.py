"""Allow ``python -m tact_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m tact_cli`` behaves identically to the ``tact``
console script.
"""

from __future__ import annotations

from tact_cli.cli.app import cli

if __name__ == "__main__":
    cli()
