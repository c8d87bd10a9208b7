"""Infrastructure layer — external system integration.

This layer wraps all interaction with the compiler backend module and
with ``git``.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the orchestrator.
"""

from tact_cli.infra.compiler_backend import ModuleCompilerBackend
from tact_cli.infra.git_revision import GitRevisionProvider

__all__: list[str] = [
    "GitRevisionProvider",
    "ModuleCompilerBackend",
]
