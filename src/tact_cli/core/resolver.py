"""Mode resolution — classify a parsed command line.

:func:`resolve` decides whether an invocation terminates immediately
(help, version), evaluates an expression, or builds, and for builds
which single :class:`~tact_cli.core.models.CompilationMode` applies.

Checks run from the most overriding (``--help``) to the most specific
(positional arity) and the first match wins, so a user who combines
several mistakes always sees the most informative complaint.

Guarantees
----------
* Pure classification — no I/O, no ``print()``.
* Invalid combinations raise :class:`~tact_cli.exceptions.UsageError`;
  the CLI layer renders the message and picks the exit code.
"""

from __future__ import annotations

from tact_cli.core.models import (
    CompilationMode,
    ParsedInvocation,
    Resolution,
    ResolvedAction,
)
from tact_cli.exceptions import UsageError

BOTH_CONFIG_AND_FILE: str = (
    "Both config and Tact file can't be simultaneously specified, pick one!"
)
MUTUALLY_EXCLUSIVE_MODES: str = (
    "Flags --with-decompilation, --func and --check are mutually exclusive!"
)
CONFIG_OR_FILE_REQUIRED: str = "Either config or Tact file have to be specified!"
SINGLE_FILE_ONLY: str = (
    "Only one Tact file can be specified at a time. "
    "If you want more, provide a config!"
)


def count_mode_flags(invocation: ParsedInvocation) -> int:
    """Return how many of ``--check``, ``--func``, ``--with-decompilation`` are set."""
    return sum(1 for flag in invocation.mode_flags if flag)


def select_mode(invocation: ParsedInvocation) -> CompilationMode:
    """Map the (at most one) set mode flag to a :class:`CompilationMode`."""
    if invocation.check:
        return CompilationMode.CHECK_ONLY
    if invocation.func:
        return CompilationMode.FUNC_ONLY
    if invocation.with_decompilation:
        return CompilationMode.FULL_WITH_DECOMPILATION
    return CompilationMode.DEFAULT


def resolve(invocation: ParsedInvocation) -> Resolution:
    """Classify *invocation* into a single :class:`Resolution`.

    Raises
    ------
    UsageError
        If the flags form an invalid combination.
    """
    if invocation.help:
        return Resolution(action=ResolvedAction.SHOW_HELP)

    if invocation.version:
        return Resolution(action=ResolvedAction.SHOW_VERSION)

    # A non-empty --eval is terminal: nothing after it is validated.
    if invocation.eval:
        return Resolution(
            action=ResolvedAction.EVALUATE,
            expression=invocation.eval,
        )

    if invocation.config is not None and invocation.input:
        raise UsageError(BOTH_CONFIG_AND_FILE)

    num_mode_flags = count_mode_flags(invocation)
    if num_mode_flags > 1:
        raise UsageError(MUTUALLY_EXCLUSIVE_MODES)

    if not invocation.has_config_or_input and num_mode_flags > 0:
        raise UsageError(CONFIG_OR_FILE_REQUIRED)

    if len(invocation.input) > 1:
        raise UsageError(SINGLE_FILE_ONLY)

    if not invocation.has_config_or_input and not invocation.projects:
        # Bare invocation.
        return Resolution(action=ResolvedAction.SHOW_HELP)

    return Resolution(action=ResolvedAction.BUILD, mode=select_mode(invocation))
