"""``tact --help`` / ``tact --version`` — diagnostic output.

Renders the help text and the version banner.  The version banner adds
a ``git commit:`` line when the source revision can be determined; the
lookup is best effort and its failures never reach the user.
"""

from __future__ import annotations

import structlog

from tact_cli.cli import exit_codes
from tact_cli.cli.console import console
from tact_cli.core.protocols import RevisionProvider

logger = structlog.get_logger(__name__)


def lookup_revision(revisions: RevisionProvider) -> str | None:
    """Return the revision id, or ``None`` if the lookup failed for any reason."""
    try:
        return revisions.get_revision_id()
    except Exception as exc:  # noqa: BLE001
        logger.debug("Revision lookup failed", error=str(exc))
        return None


def show_help(help_text: str) -> int:
    """Print *help_text* to stdout."""
    console.print(help_text.rstrip("\n"))
    return exit_codes.SUCCESS


def show_version(version: str, revisions: RevisionProvider) -> int:
    """Print the version and, when known, the source revision.

    Always returns :data:`exit_codes.SUCCESS`.
    """
    console.print(version)
    revision = lookup_revision(revisions)
    if revision:
        console.print(f"git commit: {revision}")
    return exit_codes.SUCCESS
