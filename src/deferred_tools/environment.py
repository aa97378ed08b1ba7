"""Settings read from the process environment.

Values are read when asked for, not at import. A host that keeps its settings
in a `.env` file calls `load_env_file()` first; the package never touches the
environment on its own.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env_file(path: str | Path | None = None) -> bool:
    """Load a `.env` file into the process environment.

    Variables already set in the environment win over the file.

    Args:
        path: The file to load. Defaults to the nearest `.env` found by dotenv.

    Returns:
        True if the file defined any variables
    """
    return load_dotenv(path, override=False)


def _flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def log_enabled() -> bool:
    """Whether `DEFERRED_TOOLS_LOG` asks for a stderr log sink at import time."""
    return _flag("DEFERRED_TOOLS_LOG")


def log_level() -> str:
    """Minimum level for the stderr sink (`DEFERRED_TOOLS_LOG_LEVEL`, default WARNING)."""
    return os.getenv("DEFERRED_TOOLS_LOG_LEVEL", "WARNING").strip().upper()
