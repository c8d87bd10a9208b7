"""Package metadata for tact-cli.

Single source of truth for the version string and the one-line
description shown by ``tact --help``.
"""

from __future__ import annotations

__version__: str = "1.6.0"

DESCRIPTION: str = "Tact is a next-gen smart contract language for TON"
