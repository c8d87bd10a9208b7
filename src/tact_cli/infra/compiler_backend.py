"""Module-backed implementation of :class:`~tact_cli.core.protocols.CompilerBackend`.

This module is the **only** place in the codebase that imports the
compiler backend.  The backend module is imported lazily so that
``--help`` and ``--version`` keep working when it is not installed.

The backend module must expose:

* ``run(payload: dict) -> awaitable | result`` — build entry point.
  *payload* is :meth:`ExecutionRequest.to_payload`; the result is a
  mapping or object with an ``ok`` field.
* ``parse_and_eval_expression(source: str) -> result`` — evaluator
  entry point.  The result is a mapping or object with a ``kind`` field,
  plus ``value`` (``kind == "ok"``) or ``message`` (any other kind).

Exceptions raised by the backend itself are NOT wrapped: the
orchestrator reports them as execution / evaluation errors.
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Mapping
from types import ModuleType
from typing import Any

import structlog

from tact_cli.core.models import BuildResult, EvalResult, ExecutionRequest
from tact_cli.exceptions import BackendContractError, EnvironmentError

logger = structlog.get_logger(__name__)

_MISSING = object()


def _field(result: Any, name: str, default: Any = _MISSING) -> Any:
    """Read *name* from a mapping or attribute-style backend result."""
    if isinstance(result, Mapping):
        value = result.get(name, default)
    else:
        value = getattr(result, name, default)
    if value is _MISSING:
        raise BackendContractError(
            f"Backend result has no '{name}' field: {result!r}",
        )
    return value


def to_build_result(raw: Any) -> BuildResult:
    """Normalise a raw backend build result into a :class:`BuildResult`."""
    if isinstance(raw, BuildResult):
        return raw
    return BuildResult(ok=_field(raw, "ok") is True)


def to_eval_result(raw: Any) -> EvalResult:
    """Normalise a raw evaluator result into an :class:`EvalResult`."""
    if isinstance(raw, EvalResult):
        return raw
    kind = str(_field(raw, "kind"))
    if kind == "ok":
        return EvalResult(kind=kind, value=_field(raw, "value", None))
    return EvalResult(kind=kind, message=str(_field(raw, "message", "")))


class ModuleCompilerBackend:
    """Concrete :class:`CompilerBackend` delegating to an importable module.

    Usage::

        backend = ModuleCompilerBackend("tact_compiler")
        result = await backend.run(request)

    This class satisfies the :class:`~tact_cli.core.protocols.CompilerBackend`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, module_name: str) -> None:
        self._module_name: str = module_name
        self._module: ModuleType | None = None

    @property
    def module_name(self) -> str:
        return self._module_name

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load(self) -> ModuleType:
        """Import the backend module once and cache it."""
        if self._module is not None:
            return self._module
        try:
            module = importlib.import_module(self._module_name)
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                f"Compiler backend '{self._module_name}' is not installed.",
                hint="Install the Tact compiler package or set TACT_BACKEND.",
            ) from exc
        logger.debug("Loaded compiler backend", module=self._module_name)
        self._module = module
        return module

    def _entry_point(self, name: str) -> Any:
        module = self._load()
        func = getattr(module, name, None)
        if not callable(func):
            raise BackendContractError(
                f"Compiler backend '{self._module_name}' does not provide {name}().",
            )
        return func

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    async def run(self, request: ExecutionRequest) -> BuildResult:
        """Run a build; awaits the backend when it is asynchronous."""
        run = self._entry_point("run")
        raw = run(request.to_payload())
        if inspect.isawaitable(raw):
            raw = await raw
        return to_build_result(raw)

    def parse_and_eval_expression(self, source: str) -> Any:
        """Evaluate *source*; returns an :class:`EvalResult` or an awaitable of one."""
        evaluate = self._entry_point("parse_and_eval_expression")
        raw = evaluate(source)
        if inspect.isawaitable(raw):
            return self._await_eval(raw)
        return to_eval_result(raw)

    @staticmethod
    async def _await_eval(pending: Any) -> EvalResult:
        return to_eval_result(await pending)
