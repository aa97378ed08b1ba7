"""ToolSource - where the manager gets its tool list from.

The transport that actually lists tools (an MCP client session, an HTTP call)
lives outside this package. Anything with an async `get_tools()` returning raw
records can be handed to `DeferredToolManager.initialize()`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from deferred_tools.util.snapshot import snapshot


@runtime_checkable
class ToolSource(Protocol):
    async def get_tools(self) -> Sequence[Mapping[str, Any]]:
        """Return the current raw tool records."""
        ...


class StaticToolSource:
    """A ToolSource serving a fixed list of records.

    Useful for hosts whose tool list is known up front, and for tests. Each
    call returns a fresh copy of the records.

    Attributes:
        records: The records to serve; may be replaced between fetches
        error: If set, `get_tools()` raises it instead of returning records
        fetch_count: How many times `get_tools()` has been called
    """

    records: list[Mapping[str, Any]]
    error: Exception | None
    fetch_count: int

    def __init__(
        self,
        records: Sequence[Mapping[str, Any]] = (),
        error: Exception | None = None,
    ):
        self.records = list(records)
        self.error = error
        self.fetch_count = 0

    async def get_tools(self) -> list[Mapping[str, Any]]:
        self.fetch_count += 1
        if self.error is not None:
            raise self.error
        return snapshot(self.records)
