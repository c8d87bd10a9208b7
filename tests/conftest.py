"""Shared pytest fixtures and configuration for the tact-cli test suite.

Guidelines
----------
* No real compiler backend — it is stubbed at the protocol boundary.
* ``git`` is never invoked; revision lookup is stubbed or
  ``subprocess.run`` is mocked.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from tact_cli.core.models import BuildResult, EvalResult
from tact_cli.settings import Settings
from tact_cli.utils.log_setup import setup_logging


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    setup_logging("WARNING")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        backend_module="fake_tact_backend",
        repository_root=tmp_path,
    )


@pytest.fixture
def backend() -> MagicMock:
    """Backend stub: builds succeed, expressions evaluate to 2."""
    stub = MagicMock()
    stub.run = AsyncMock(return_value=BuildResult(ok=True))
    stub.parse_and_eval_expression.return_value = EvalResult(kind="ok", value=2)
    return stub


@pytest.fixture
def revisions() -> MagicMock:
    stub = MagicMock()
    stub.get_revision_id.return_value = "0123456789abcdef0123456789abcdef01234567"
    return stub
