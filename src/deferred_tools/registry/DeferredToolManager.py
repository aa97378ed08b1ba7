"""DeferredToolManager - lifecycle and call validation for deferred tool loading.

The host creates one manager per client session and passes it to whatever
needs tool information. The manager fetches the tool list once from a
`ToolSource`, serves the token-cheap metadata view for model context, and
checks proposed calls against the cached schemas.

State machine:
    uninitialized --initialize()--> initialized
    initialized --reset() / invalidate() / tools list_changed--> uninitialized

`initialize()` on an initialized manager does nothing. A failed
`initialize()` leaves the manager where it was.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from glom import glom

from deferred_tools.log import logger
from deferred_tools.notifications.Notification import Notification
from deferred_tools.registry.ToolRegistry import ToolRegistry
from deferred_tools.source.ToolSource import ToolSource
from deferred_tools.tool.ToolMetadata import ToolMetadata
from deferred_tools.tool.ToolRecord import ToolRecord
from deferred_tools.tool.ValidationResult import ValidationResult


class DeferredToolManager:
    """Initialization guard and validation on top of a ToolRegistry."""

    _registry: ToolRegistry
    _initialized: bool

    def __init__(self, registry: ToolRegistry | None = None):
        self._registry = registry if registry is not None else ToolRegistry()
        self._initialized = False
        # Starts empty even when handed a preloaded registry
        self._registry.invalidate_all()

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    # Lifecycle

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self, source: ToolSource) -> None:
        """Fetch the tool list from `source` and cache it.

        Does nothing if the manager is already initialized; call `reset()` or
        `invalidate()` first to force a refetch. Errors from the source (and
        `MalformedToolRecordError` from loading) propagate unchanged, with the
        manager still uninitialized and the cache empty. There is no retry.
        """
        if self._initialized:
            return

        try:
            tools = await source.get_tools()
            self._registry.cache_from_records(tools)
        except Exception as e:
            logger.error(f"[manager] failed to initialize tool registry: {e}")
            self._registry.invalidate_all()
            raise

        self._initialized = True
        logger.info(f"[manager] cached {self._registry.count} tools in deferred registry")

    def reset(self) -> None:
        """Clear the cache and the initialized flag, whatever the current state."""
        self._initialized = False
        self._registry.invalidate_all()

    def invalidate(self) -> None:
        """The upstream tool set changed: drop everything until the next initialize."""
        self.reset()
        logger.info("[manager] tool registry invalidated")

    def handle_notification(self, notification: Notification) -> bool:
        """React to a server notification.

        Returns:
            True if the notification was a tool list change (and the cache was
            invalidated), False if it was ignored
        """
        if notification.is_tools_list_changed:
            self.invalidate()
            return True
        logger.debug(f"[manager] ignoring notification {notification.method}")
        return False

    # Metadata view

    def get_metadata_for_llm(self) -> list[dict[str, str]]:
        """Name and description of every cached tool, for the model's context.

        Empty when uninitialized. Never includes input schemas.
        """
        return [metadata.to_json() for metadata in self._registry.get_all_metadata()]

    def get_all_metadata(self) -> list[ToolMetadata]:
        return self._registry.get_all_metadata()

    def get_metadata(self, name: str) -> ToolMetadata | None:
        return self._registry.get_metadata(name)

    # Schema view

    def get_full_schema(self, name: str) -> ToolRecord | None:
        return self._registry.get_schema(name)

    def has_tool(self, name: str) -> bool:
        return self._registry.has_tool(name)

    @property
    def tool_names(self) -> list[str]:
        return self._registry.tool_names

    @property
    def count(self) -> int:
        return self._registry.count

    # Validation

    def validate_tool_call(
        self, name: str, arguments: Mapping[str, Any]
    ) -> ValidationResult:
        """Check a proposed call against the cached schema of `name`.

        Only presence of the schema's `required` parameters is checked, in
        list order, stopping at the first one missing. Argument values are not
        inspected.

        Returns:
            `ValidationResult.valid()`, or an invalid result with reason
            `Tool not found: <name>` or `Missing required parameter: <param>`
        """
        schema = self._registry.get_schema(name)
        if schema is None:
            return ValidationResult.invalid(f"Tool not found: {name}")

        if schema.get("inputSchema") is None:
            return ValidationResult.valid()

        required = glom(schema, "inputSchema.required", default=None) or []
        for param in required:
            if param not in arguments:
                return ValidationResult.invalid(f"Missing required parameter: {param}")

        return ValidationResult.valid()
