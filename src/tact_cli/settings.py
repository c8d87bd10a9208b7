"""Runtime configuration for tact-cli.

Settings are read once from the environment by :func:`load_settings`
and passed explicitly into the orchestrator, so nothing below the CLI
entry point touches ``os.environ``.

Environment variables
---------------------
``TACT_BACKEND``
    Import path of the compiler backend module (default ``tact_compiler``).
``TACT_LOG_LEVEL``
    Log level for diagnostic output (default ``WARNING``).
``TACT_GIT_TIMEOUT``
    Seconds to wait for ``git rev-parse`` on ``--version`` (default ``5``).
``TACT_REPOSITORY_ROOT``
    Directory the revision lookup runs in (default: the installed package).

Empty variables count as unset.  Any other invalid value is rejected
with :class:`~tact_cli.exceptions.ConfigurationError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tact_cli.exceptions import ConfigurationError
from tact_cli.version import DESCRIPTION, __version__

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_BACKEND_MODULE: str = "tact_compiler"
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"
DEFAULT_GIT_TIMEOUT: float = 5.0
PACKAGE_ROOT: Path = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Explicit configuration handed to the orchestrator at startup."""

    backend_module: str = Field(
        DEFAULT_BACKEND_MODULE, alias="TACT_BACKEND", min_length=1,
    )
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    git_timeout: float = Field(DEFAULT_GIT_TIMEOUT, gt=0)
    repository_root: Path = PACKAGE_ROOT

    model_config = SettingsConfigDict(
        env_prefix="TACT_",
        env_ignore_empty=True,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("backend_module", mode="before")
    @classmethod
    def _strip_backend(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("repository_root")
    @classmethod
    def _expand_root(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def version(self) -> str:
        return __version__

    @property
    def description(self) -> str:
        return DESCRIPTION


def load_settings() -> Settings:
    """Build :class:`Settings` from the process environment.

    Raises
    ------
    ConfigurationError
        If a ``TACT_*`` variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid environment configuration ({problems})",
            hint="Check the TACT_* environment variables.",
        ) from exc
