"""Protocols (interfaces) consumed by the orchestration layer.

These define the contracts that infrastructure adapters must satisfy.
The orchestrator depends ONLY on these protocols — never on concrete
implementations — so tests can substitute stubs for the compiler and
for ``git``.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol

from tact_cli.core.models import BuildResult, EvalResult, ExecutionRequest


class CompilerBackend(Protocol):
    """Contract for the compiler backend.

    Any object that implements :meth:`run` and
    :meth:`parse_and_eval_expression` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def run(self, request: ExecutionRequest) -> Awaitable[BuildResult]:
        """Compile according to *request*.

        A returned ``BuildResult(ok=False)`` is a structured failure.
        Anything raised instead is treated as an unexpected error by the
        caller.
        """
        ...  # pragma: no cover

    def parse_and_eval_expression(
        self,
        source: str,
    ) -> EvalResult | Awaitable[EvalResult]:
        """Parse and evaluate a single Tact expression.

        May return the result directly or an awaitable of it.
        """
        ...  # pragma: no cover


class RevisionProvider(Protocol):
    """Contract for best-effort source-control revision lookup."""

    def get_revision_id(self) -> str | None:
        """Return the current revision id, or ``None`` when unknown.

        Raises
        ------
        RevisionLookupError
            When the lookup fails.  Callers on the version path suppress it.
        """
        ...  # pragma: no cover
