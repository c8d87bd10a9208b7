"""CLI application entry point for ``tact``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tact_cli.exceptions.UsageError` from the mode
resolver, ``KeyboardInterrupt``, and any unexpected ``Exception``,
rendering user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — flag validation is delegated to
  :mod:`tact_cli.core.resolver` and backend dispatch to
  :class:`~tact_cli.cli.orchestrator.Orchestrator`.
* Collaborators (backend, revision lookup, settings) are injectable so
  that :func:`main` can be exercised without a compiler or ``git``.
"""

from __future__ import annotations

import sys

from tact_cli.cli import exit_codes
from tact_cli.cli.args import build_parser, parse_invocation
from tact_cli.cli.console import console, error_console
from tact_cli.cli.orchestrator import Orchestrator
from tact_cli.core.protocols import CompilerBackend, RevisionProvider
from tact_cli.core.resolver import resolve
from tact_cli.exceptions import TactCliError, UsageError
from tact_cli.settings import Settings, load_settings
from tact_cli.utils.log_setup import setup_logging


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    backend: CompilerBackend | None = None,
    revisions: RevisionProvider | None = None,
    settings: Settings | None = None,
) -> int:
    """Run the ``tact`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    backend, revisions, settings:
        Collaborator overrides.  Defaults are built from *settings*.

    Returns
    -------
    int
        OS process exit code.
    """
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level)

    parser = build_parser(settings.version, settings.description)
    invocation = parse_invocation(parser, argv)

    try:
        resolution = resolve(invocation)
    except UsageError as exc:
        error_console.print(f"Error: {exc}")
        console.print(parser.format_help().rstrip("\n"))
        return exit_codes.USAGE_ERROR

    if backend is None:
        from tact_cli.infra.compiler_backend import ModuleCompilerBackend

        backend = ModuleCompilerBackend(settings.backend_module)

    if revisions is None:
        from tact_cli.infra.git_revision import GitRevisionProvider

        revisions = GitRevisionProvider(
            settings.repository_root,
            timeout=settings.git_timeout,
        )

    orchestrator = Orchestrator(
        backend,
        revisions,
        settings,
        help_text=parser.format_help(),
    )
    return orchestrator.execute(resolution, invocation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TactCliError as exc:
        error_console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            error_console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    except KeyboardInterrupt:
        error_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
