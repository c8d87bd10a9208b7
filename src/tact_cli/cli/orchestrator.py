"""Execution orchestration — turn a :class:`Resolution` into an exit code.

The orchestrator owns the mapping from backend outcomes to process
exit status:

* backend success → :data:`exit_codes.SUCCESS`
* structured backend failure (``ok=False`` or a failed evaluation)
  → :data:`exit_codes.BACKEND_FAILURE`
* anything raised by the backend → :data:`exit_codes.UNEXPECTED_ERROR`,
  reported with an ``Execution error`` / ``Evaluation error`` prefix.

At most one backend call is outstanding at a time; asynchronous entry
points are driven to completion with :func:`asyncio.run`.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable
from typing import TypeVar

import structlog

from tact_cli.cli import exit_codes
from tact_cli.cli.console import console, error_console
from tact_cli.cli.diagnostics import show_help, show_version
from tact_cli.core.models import (
    BuildResult,
    EvalResult,
    ExecutionRequest,
    ParsedInvocation,
    Resolution,
    ResolvedAction,
)
from tact_cli.core.protocols import CompilerBackend, RevisionProvider
from tact_cli.exceptions import TactCliError
from tact_cli.settings import Settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def _await(pending: Awaitable[T]) -> T:
    return await pending


def _report(prefix: str, exc: Exception) -> None:
    error_console.print(f"{prefix}: {type(exc).__name__}: {exc}")
    if isinstance(exc, TactCliError) and exc.hint:
        error_console.print(f"Hint: {exc.hint}")


def build_request(invocation: ParsedInvocation, resolution: Resolution) -> ExecutionRequest:
    """Build the backend request for a resolved build invocation."""
    return ExecutionRequest(
        file_name=invocation.input[0] if invocation.input else None,
        config_path=invocation.config,
        project_names=invocation.projects,
        mode=resolution.mode,
        suppress_log=invocation.quiet,
    )


class Orchestrator:
    """Dispatch resolved invocations to the backend.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`CompilerBackend` protocol.
    revisions:
        Any object satisfying the :class:`RevisionProvider` protocol.
    settings:
        Runtime configuration; supplies the version string.
    help_text:
        Rendered usage text shown for help and bare invocations.
    """

    def __init__(
        self,
        backend: CompilerBackend,
        revisions: RevisionProvider,
        settings: Settings,
        *,
        help_text: str,
    ) -> None:
        self._backend: CompilerBackend = backend
        self._revisions: RevisionProvider = revisions
        self._settings: Settings = settings
        self._help_text: str = help_text

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, resolution: Resolution, invocation: ParsedInvocation) -> int:
        """Carry out *resolution* and return the process exit code."""
        logger.debug(
            "Resolved invocation",
            action=resolution.action.value,
            mode=resolution.mode.value,
        )

        if resolution.action is ResolvedAction.SHOW_HELP:
            return show_help(self._help_text)

        if resolution.action is ResolvedAction.SHOW_VERSION:
            return show_version(self._settings.version, self._revisions)

        if resolution.action is ResolvedAction.EVALUATE:
            return self.evaluate(resolution.expression or "")

        return self.build(build_request(invocation, resolution))

    def evaluate(self, expression: str) -> int:
        """Evaluate *expression* and print its value or failure message.

        Both are command data and are written unrendered.
        """
        try:
            outcome = self._backend.parse_and_eval_expression(expression)
            if inspect.isawaitable(outcome):
                outcome = asyncio.run(_await(outcome))
            result: EvalResult = outcome
            succeeded = result.ok
            text = str(result.value) if succeeded else str(result.message)
        except Exception as exc:
            logger.debug("Evaluation raised", exc_info=True)
            _report("Evaluation error", exc)
            return exit_codes.UNEXPECTED_ERROR

        if succeeded:
            console.write(text)
            return exit_codes.SUCCESS

        error_console.write(text)
        return exit_codes.BACKEND_FAILURE

    def build(self, request: ExecutionRequest) -> int:
        """Run *request* through the backend and map the result."""
        logger.info(
            "Dispatching build",
            file_name=request.file_name,
            config_path=request.config_path,
            projects=list(request.project_names),
            mode=request.mode.value,
        )
        try:
            result: BuildResult = asyncio.run(_await(self._backend.run(request)))
            succeeded = result.ok
        except Exception as exc:
            logger.debug("Build raised", exc_info=True)
            _report("Execution error", exc)
            return exit_codes.UNEXPECTED_ERROR

        return exit_codes.SUCCESS if succeeded else exit_codes.BACKEND_FAILURE
