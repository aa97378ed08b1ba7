"""Subscription management for ToolRegistry."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from deferred_tools.log import logger
from deferred_tools.registry.ToolSetChange import ToolSetChange

SubscriberCallback: TypeAlias = Callable[[ToolSetChange], None]


class Subscribers:
    """Manages registry subscription callbacks.

    Subscribers receive the `ToolSetChange` describing which tool names a load
    or invalidation added, removed or changed. The registry has already
    swapped its contents when they are called, so a failing callback is logged
    and skipped rather than raised into the load.
    """

    _callbacks: list[SubscriberCallback]

    def __init__(self) -> None:
        self._callbacks = []

    def append(self, callback: SubscriberCallback) -> None:
        """Add a subscription callback."""
        self._callbacks.append(callback)

    def remove(self, callback: SubscriberCallback) -> None:
        """Remove a subscription callback."""
        self._callbacks.remove(callback)

    def notify(self, change: ToolSetChange) -> None:
        """Notify all subscribers of a change to the cached tool set.

        Args:
            change: What the last load or invalidation changed
        """
        if not change:  # nothing added, removed or changed
            return

        for callback in list(self._callbacks):
            try:
                callback(change)
            except Exception:
                logger.exception(f"[registry] subscriber {callback!r} failed")
