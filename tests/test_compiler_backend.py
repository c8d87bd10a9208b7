"""Tests for the module-backed compiler adapter (infra/compiler_backend.py).

A throwaway module is registered in ``sys.modules`` — no compiler is
installed or imported.

Coverage:
* Lazy import and caching of the backend module.
* Missing module / missing entry point errors.
* Payload forwarding and sync / async result normalisation.
* Mapping and attribute-style result shapes.
"""

from __future__ import annotations

import asyncio
import sys
import types
from typing import Any

import pytest

from tact_cli.core.models import BuildResult, CompilationMode, EvalResult, ExecutionRequest
from tact_cli.exceptions import BackendContractError, EnvironmentError
from tact_cli.infra.compiler_backend import (
    ModuleCompilerBackend,
    to_build_result,
    to_eval_result,
)

_MODULE = "fake_tact_backend"


@pytest.fixture
def fake_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = types.ModuleType(_MODULE)
    module.calls = []  # type: ignore[attr-defined]

    async def run(payload: dict[str, Any]) -> dict[str, Any]:
        module.calls.append(payload)  # type: ignore[attr-defined]
        return {"ok": payload["fileName"] != "broken.tact"}

    def parse_and_eval_expression(source: str) -> dict[str, Any]:
        if source == "1/0":
            return {"kind": "error", "message": "division by zero"}
        return {"kind": "ok", "value": 2}

    module.run = run  # type: ignore[attr-defined]
    module.parse_and_eval_expression = parse_and_eval_expression  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, _MODULE, module)
    return module


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

class TestLoading:
    def test_missing_module(self) -> None:
        backend = ModuleCompilerBackend("definitely_not_a_tact_backend")
        with pytest.raises(EnvironmentError, match="not installed") as exc_info:
            backend.parse_and_eval_expression("1")
        assert exc_info.value.hint is not None
        assert "TACT_BACKEND" in exc_info.value.hint

    def test_missing_entry_point(
        self, fake_module: types.ModuleType, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delattr(fake_module, "parse_and_eval_expression")
        with pytest.raises(BackendContractError, match="parse_and_eval_expression"):
            ModuleCompilerBackend(_MODULE).parse_and_eval_expression("1")

    def test_module_is_cached(
        self, fake_module: types.ModuleType, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        backend = ModuleCompilerBackend(_MODULE)
        backend.parse_and_eval_expression("1")
        monkeypatch.delitem(sys.modules, _MODULE)
        # Still usable once loaded.
        assert backend.parse_and_eval_expression("1") == EvalResult(kind="ok", value=2)


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

class TestRun:
    def test_forwards_payload(self, fake_module: types.ModuleType) -> None:
        request = ExecutionRequest(
            file_name="main.tact",
            config_path=None,
            mode=CompilationMode.CHECK_ONLY,
            suppress_log=True,
        )
        result = asyncio.run(ModuleCompilerBackend(_MODULE).run(request))

        assert result == BuildResult(ok=True)
        assert fake_module.calls == [request.to_payload()]  # type: ignore[attr-defined]

    def test_failed_build(self, fake_module: types.ModuleType) -> None:
        request = ExecutionRequest(file_name="broken.tact", config_path=None)
        result = asyncio.run(ModuleCompilerBackend(_MODULE).run(request))
        assert result == BuildResult(ok=False)

    def test_synchronous_run(
        self, fake_module: types.ModuleType, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(fake_module, "run", lambda payload: {"ok": True})
        request = ExecutionRequest(file_name="main.tact", config_path=None)
        assert asyncio.run(ModuleCompilerBackend(_MODULE).run(request)).ok is True

    def test_backend_exception_is_not_wrapped(
        self, fake_module: types.ModuleType, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def run(payload: dict[str, Any]) -> None:
            raise RuntimeError("internal compiler error")

        monkeypatch.setattr(fake_module, "run", run)
        request = ExecutionRequest(file_name="main.tact", config_path=None)
        with pytest.raises(RuntimeError, match="internal compiler error"):
            asyncio.run(ModuleCompilerBackend(_MODULE).run(request))


# ---------------------------------------------------------------------------
# parse_and_eval_expression
# ---------------------------------------------------------------------------

class TestEvaluate:
    def test_ok(self, fake_module: types.ModuleType) -> None:
        result = ModuleCompilerBackend(_MODULE).parse_and_eval_expression("1+1")
        assert result == EvalResult(kind="ok", value=2)

    def test_error(self, fake_module: types.ModuleType) -> None:
        result = ModuleCompilerBackend(_MODULE).parse_and_eval_expression("1/0")
        assert result == EvalResult(kind="error", message="division by zero")
        assert result.ok is False

    def test_async_evaluator(
        self, fake_module: types.ModuleType, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def evaluate(source: str) -> dict[str, Any]:
            return {"kind": "ok", "value": source}

        monkeypatch.setattr(fake_module, "parse_and_eval_expression", evaluate)
        pending = ModuleCompilerBackend(_MODULE).parse_and_eval_expression("x")
        assert asyncio.run(pending) == EvalResult(kind="ok", value="x")


# ---------------------------------------------------------------------------
# Result normalisation
# ---------------------------------------------------------------------------

class TestNormalisation:
    def test_attribute_style_build_result(self) -> None:
        assert to_build_result(types.SimpleNamespace(ok=True)) == BuildResult(ok=True)

    def test_only_literal_true_is_success(self) -> None:
        assert to_build_result({"ok": 1}) == BuildResult(ok=False)

    def test_build_result_without_ok(self) -> None:
        with pytest.raises(BackendContractError, match="'ok'"):
            to_build_result({"status": "done"})

    def test_attribute_style_eval_error(self) -> None:
        raw = types.SimpleNamespace(kind="error", message="bad")
        assert to_eval_result(raw) == EvalResult(kind="error", message="bad")

    def test_eval_result_without_kind(self) -> None:
        with pytest.raises(BackendContractError, match="'kind'"):
            to_eval_result({"value": 2})

    def test_passthrough(self) -> None:
        result = EvalResult(kind="ok", value=1)
        assert to_eval_result(result) is result
