"""Infrastructure: best-effort source-control revision lookup.

Runs ``git rev-parse HEAD`` to report which commit the compiler was
built from.  Any failure surfaces as
:class:`~tact_cli.exceptions.RevisionLookupError`; the version path
suppresses it.

Rules
-----
* Output captured, stderr discarded, stdin closed.
* Bounded by a timeout so a hung ``git`` cannot block ``--version``.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import structlog

from tact_cli.exceptions import RevisionLookupError

logger = structlog.get_logger(__name__)

GIT_COMMAND: tuple[str, ...] = ("git", "rev-parse", "HEAD")


class GitRevisionProvider:
    """Concrete :class:`~tact_cli.core.protocols.RevisionProvider` backed by ``git``.

    Parameters
    ----------
    cwd:
        Directory to run ``git`` in.  ``None`` uses the process cwd.
    timeout:
        Seconds before the lookup is abandoned.
    """

    def __init__(self, cwd: Path | None = None, *, timeout: float = 5.0) -> None:
        self._cwd: Path | None = cwd
        self._timeout: float = timeout

    def get_revision_id(self) -> str | None:
        """Return the ``HEAD`` commit hash.

        Raises
        ------
        RevisionLookupError
            When git is missing, times out, exits non-zero, or the
            working directory is not a repository.
        """
        if shutil.which(GIT_COMMAND[0]) is None:
            raise RevisionLookupError("git is not installed or not on PATH.")

        try:
            completed = subprocess.run(
                GIT_COMMAND,
                cwd=self._cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                timeout=self._timeout,
                check=True,
            )
        except subprocess.TimeoutExpired as exc:
            raise RevisionLookupError(
                f"git rev-parse timed out after {self._timeout:g}s",
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise RevisionLookupError(
                f"git rev-parse exited with status {exc.returncode}",
            ) from exc
        except OSError as exc:
            raise RevisionLookupError(f"Could not run git: {exc}") from exc

        revision = completed.stdout.strip()
        logger.debug("Resolved source revision", revision=revision, cwd=str(self._cwd))
        return revision or None
