"""Custom exception hierarchy for tact-cli.

All exceptions raised deliberately by this package inherit from
:class:`TactCliError`.  Errors coming out of the compiler backend are
left untouched: the orchestrator reports them as execution or
evaluation errors, which is how users tell "the tool crashed" apart
from "the tool ran and reported failure".

Hierarchy
---------
TactCliError
├── UsageError
├── ConfigurationError
├── EnvironmentError
├── BackendContractError
└── RevisionLookupError
"""

from __future__ import annotations


class TactCliError(Exception):
    """Base exception for all tact-cli errors.

    Every user-visible error condition raised by this package maps to a
    subclass of this exception so that the CLI error boundary can render
    a clean message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(TactCliError):
    """Raised when the given flags form an invalid combination."""


class ConfigurationError(TactCliError):
    """Raised when a TACT_* environment variable holds an invalid value."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TactCliError):
    """Raised when a required runtime dependency is not available."""


class BackendContractError(TactCliError):
    """Raised when the compiler backend does not honour its contract."""


class RevisionLookupError(TactCliError):
    """Raised when the source-control revision cannot be determined."""
