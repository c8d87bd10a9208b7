"""Core layer — pure flag classification and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem, process or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from tact_cli.core.models import (
    BuildResult,
    CompilationMode,
    EvalResult,
    ExecutionRequest,
    ParsedInvocation,
    Resolution,
    ResolvedAction,
)
from tact_cli.core.protocols import CompilerBackend, RevisionProvider
from tact_cli.core.resolver import resolve

__all__: list[str] = [
    "BuildResult",
    "CompilationMode",
    "CompilerBackend",
    "EvalResult",
    "ExecutionRequest",
    "ParsedInvocation",
    "Resolution",
    "ResolvedAction",
    "RevisionProvider",
    "resolve",
]
