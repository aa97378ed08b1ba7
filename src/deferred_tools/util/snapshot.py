"""Snapshot utility for copying tool records into and out of the cache.

Records handed to the registry belong to the caller, so the registry keeps its
own deep copy. Current implementation uses `copy.deepcopy`; records are plain
JSON-compatible values, so an `orjson` dumps/loads round trip would also work.

To swap implementation, modify the `snapshot()` function body.
"""

from __future__ import annotations

import copy
from typing import TypeVar

S = TypeVar("S")


def snapshot(value: S) -> S:
    """Create a deep copy of a record (or mapping of records).

    Args:
        value: The value to copy

    Returns:
        A deep copy that shares no mutable state with the original
    """
    return copy.deepcopy(value)
