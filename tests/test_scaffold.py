"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes match the documented contract.
"""

from __future__ import annotations

import pytest

from tact_cli import __version__
from tact_cli.cli import exit_codes
from tact_cli.cli.app import cli, main
from tact_cli.exceptions import (
    BackendContractError,
    EnvironmentError,
    RevisionLookupError,
    TactCliError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [UsageError, EnvironmentError, BackendContractError, RevisionLookupError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TactCliError]
    ) -> None:
        assert issubclass(exc_class, TactCliError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TactCliError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TactCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = TactCliError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_unexpected_error_is_one(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 1

    def test_usage_error_is_two(self) -> None:
        assert exit_codes.USAGE_ERROR == 2

    def test_backend_failure_is_30(self) -> None:
        assert exit_codes.BACKEND_FAILURE == 30

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_callables(self) -> None:
        assert callable(main)
        assert callable(cli)

    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: tact" in capsys.readouterr().out
