"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  These
values are an external contract: scripts wrapping ``tact`` depend on
them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Help or version shown, bare invocation, or the backend reported success."""

UNEXPECTED_ERROR: int = 1
"""Evaluation or execution raised instead of returning a result."""

USAGE_ERROR: int = 2
"""Invalid flag combination.  Matches argparse's own rejection code."""

BACKEND_FAILURE: int = 30
"""The backend ran and reported a structured failure."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
