"""Logging helpers for tact-cli."""

from __future__ import annotations

import logging
import sys

import structlog

__all__ = ["setup_logging"]

_HANDLER_NAME = "tact-cli-stderr"


def setup_logging(level: str = "WARNING") -> None:
    """Configure structlog over stdlib logging, writing to stderr.

    Only the ``tact_cli`` logger tree is touched; calling this again
    replaces the previous handler instead of stacking a new one.
    Diagnostic events stay silent at the default ``WARNING`` level so
    that stdout carries only the command's own output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["event"],
                drop_missing=True,
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger("tact_cli")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
