"""ToolRegistry - two-view cache of tool definitions.

The registry holds the last loaded tool list and answers from it in two
projections: `ToolMetadata` (name and description, cheap enough to list in a
model's context) and the full raw record (for validating and executing calls).

Both views come from one mapping of `ToolEntry` values, so a name is either in
both or in neither. Every load replaces that mapping wholesale: the new one is
built aside and swapped in with a single assignment, so a reader never sees a
half-loaded cache.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from deferred_tools.log import logger
from deferred_tools.registry.Subscribers import SubscriberCallback, Subscribers
from deferred_tools.registry.ToolSetChange import ToolSetChange
from deferred_tools.tool.Tool import Tool
from deferred_tools.tool.ToolMetadata import ToolMetadata
from deferred_tools.tool.ToolRecord import ToolRecord, check_tool_record
from deferred_tools.util.snapshot import snapshot


@dataclass(frozen=True)
class ToolEntry:
    """One cached tool: both views of the same record."""

    metadata: ToolMetadata
    record: ToolRecord


class ToolRegistry:
    """Cache of tool definitions with a metadata view and a schema view."""

    _entries: dict[str, ToolEntry]
    _initialized: bool
    _subscribers: Subscribers

    def __init__(self) -> None:
        self._entries = {}
        self._initialized = False
        self._subscribers = Subscribers()

    # Loading

    def cache_from_records(self, records: Iterable[Any]) -> None:
        """Replace the cache with the given raw tool records.

        Records are checked before anything is replaced; if any is malformed
        the whole load is rejected and the previous contents stay in place.
        A name that appears twice keeps its last record.

        Args:
            records: Raw tool records, each a mapping with at least `name`

        Raises:
            MalformedToolRecordError: If a record is not a mapping, has no
                non-empty string `name`, or has a mistyped `description` or
                `inputSchema`
        """
        entries: dict[str, ToolEntry] = {}
        for index, raw in enumerate(records):
            record = snapshot(check_tool_record(raw, index))
            entries[record["name"]] = ToolEntry(  # type: ignore[index]
                metadata=ToolMetadata.from_record(record),
                record=record,
            )
        self._swap(entries)

    def cache_from_tools(self, tools: Iterable[Tool]) -> None:
        """Replace the cache with typed `Tool` objects.

        Same contract as `cache_from_records()`.
        """
        self.cache_from_records(tool.to_record() for tool in tools)

    def invalidate_all(self) -> None:
        """Drop everything and return to the uninitialized state. Idempotent."""
        was_loaded = self._initialized or bool(self._entries)
        self._swap({}, initialized=False)
        if was_loaded:
            logger.debug("[registry] cache cleared")

    def _swap(self, entries: dict[str, ToolEntry], initialized: bool = True) -> None:
        old = self._entries
        self._entries = entries
        self._initialized = initialized
        if initialized:
            logger.debug(f"[registry] cached {len(entries)} tools")

        change = ToolSetChange.between(
            {name: entry.record for name, entry in old.items()},
            {name: entry.record for name, entry in entries.items()},
        )
        if change:
            logger.debug(
                f"[registry] tool set changed: added={list(change.added)} "
                f"removed={list(change.removed)} changed={list(change.changed)}"
            )
        self._subscribers.notify(change)

    # Subscriptions

    def subscribe(self, callback: SubscriberCallback) -> None:
        """Call `callback` with a `ToolSetChange` whenever the cached set changes."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: SubscriberCallback) -> None:
        self._subscribers.remove(callback)

    # Metadata view

    def get_all_metadata(self) -> list[ToolMetadata]:
        """All cached metadata, in load order."""
        return [entry.metadata for entry in self._entries.values()]

    def get_metadata(self, name: str) -> ToolMetadata | None:
        entry = self._entries.get(name)
        return entry.metadata if entry is not None else None

    # Schema view

    def get_schema(self, name: str) -> ToolRecord | None:
        """The full raw record for `name`, or None if it isn't cached."""
        entry = self._entries.get(name)
        return entry.record if entry is not None else None

    # Queries

    def has_tool(self, name: str) -> bool:
        return name in self._entries

    @property
    def tool_names(self) -> list[str]:
        return list(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def is_initialized(self) -> bool:
        """True after a load that hasn't since been invalidated."""
        return self._initialized
