"""Logging for deferred_tools.

All modules log through loguru's `logger`. As a library the package keeps its
messages disabled until the host opts in, either by calling
`configure_logging()` or with `DEFERRED_TOOLS_LOG=1` in the environment.
"""

from __future__ import annotations

import sys

from loguru import logger

from deferred_tools import environment

PACKAGE = "deferred_tools"

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

logger.disable(PACKAGE)


def configure_logging(level: str | None = None) -> int:
    """Enable package logging and send it to stderr.

    Args:
        level: Minimum level for the sink. Defaults to `environment.log_level()`.

    Returns:
        The loguru handler id, so the caller can `logger.remove()` it later.
    """
    logger.enable(PACKAGE)
    return logger.add(
        sys.stderr,
        level=level or environment.log_level(),
        format=LOG_FORMAT,
        filter=PACKAGE,
    )


if environment.log_enabled():
    configure_logging()

__all__ = ["logger", "configure_logging"]
