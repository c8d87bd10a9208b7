"""Domain models for tact-cli.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access and rendering.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """Immutable snapshot of one parsed command line."""

    config: str | None = None
    """Path to the project config file (``-c``/``--config``)."""

    projects: tuple[str, ...] = ()
    """Project names selected with ``-p``/``--project``, in order."""

    quiet: bool = False
    with_decompilation: bool = False
    func: bool = False
    check: bool = False

    eval: str | None = None
    """Expression passed with ``-e``/``--eval``, or ``None``."""

    version: bool = False
    help: bool = False

    input: tuple[str, ...] = ()
    """Positional arguments exactly as given; at most one is valid."""

    @property
    def mode_flags(self) -> tuple[bool, bool, bool]:
        """The mutually exclusive mode flags, in precedence order."""
        return (self.check, self.func, self.with_decompilation)

    @property
    def has_config_or_input(self) -> bool:
        return self.config is not None or len(self.input) > 0


# ---------------------------------------------------------------------------
# Compilation mode
# ---------------------------------------------------------------------------

class CompilationMode(enum.Enum):
    """The single compilation behaviour selected for a build."""

    DEFAULT = "default"
    CHECK_ONLY = "checkOnly"
    FUNC_ONLY = "funcOnly"
    FULL_WITH_DECOMPILATION = "fullWithDecompilation"

    def to_backend_option(self) -> str | None:
        """Return the backend ``mode`` option; ``None`` lets the backend decide."""
        if self is CompilationMode.DEFAULT:
            return None
        return self.value


# ---------------------------------------------------------------------------
# Resolver output
# ---------------------------------------------------------------------------

class ResolvedAction(enum.Enum):
    """What a well-formed invocation asks the orchestrator to do."""

    SHOW_HELP = "help"
    SHOW_VERSION = "version"
    EVALUATE = "eval"
    BUILD = "build"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of mode resolution for a well-formed invocation."""

    action: ResolvedAction
    mode: CompilationMode = CompilationMode.DEFAULT
    expression: str | None = None


# ---------------------------------------------------------------------------
# Backend request / results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutionRequest:
    """A single build request handed to the compiler backend."""

    file_name: str | None
    config_path: str | None
    project_names: tuple[str, ...] = ()
    mode: CompilationMode = CompilationMode.DEFAULT
    suppress_log: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Render the request in the backend's wire shape."""
        return {
            "fileName": self.file_name,
            "configPath": self.config_path,
            "projectNames": list(self.project_names),
            "additionalCliOptions": {"mode": self.mode.to_backend_option()},
            "suppressLog": self.suppress_log,
        }


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Structured outcome of a backend build."""

    ok: bool


@dataclass(frozen=True, slots=True)
class EvalResult:
    """Tagged outcome of expression evaluation.

    ``kind == "ok"`` carries :attr:`value`; every other kind is a failure
    carrying a human-readable :attr:`message`.
    """

    kind: str
    value: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == "ok"
