"""Tests for package logging (loguru)."""

from collections.abc import Iterator

import pytest
from loguru import logger

from deferred_tools.log import PACKAGE, configure_logging
from deferred_tools.registry.DeferredToolManager import DeferredToolManager
from deferred_tools.registry.ToolRegistry import ToolRegistry
from deferred_tools.registry.ToolSetChange import ToolSetChange
from deferred_tools.source.ToolSource import StaticToolSource


@pytest.fixture
def messages() -> Iterator[list[str]]:
    """Capture this package's log messages, restoring the disabled default after."""
    captured: list[str] = []
    logger.enable(PACKAGE)
    handler_id = logger.add(lambda m: captured.append(m.record["message"]), level="DEBUG")
    yield captured
    logger.remove(handler_id)
    logger.disable(PACKAGE)


class TestLogging:
    """Tests for what the manager and registry log, and when."""

    def test_invalidate_logs(self, messages: list[str]) -> None:
        """invalidate() logs that the registry was invalidated."""
        DeferredToolManager().invalidate()

        assert "[manager] tool registry invalidated" in messages

    @pytest.mark.asyncio
    async def test_initialize_logs_count(self, messages: list[str]) -> None:
        """A successful initialize() logs how many tools were cached."""
        await DeferredToolManager().initialize(StaticToolSource([{"name": "a"}]))

        assert "[manager] cached 1 tools in deferred registry" in messages

    @pytest.mark.asyncio
    async def test_initialize_failure_logs_error(self, messages: list[str]) -> None:
        """A failed fetch is logged before it propagates."""
        with pytest.raises(OSError):
            await DeferredToolManager().initialize(StaticToolSource(error=OSError("down")))

        assert any("failed to initialize" in m and "down" in m for m in messages)

    def test_failing_subscriber_is_logged(self, messages: list[str]) -> None:
        """A subscriber that raises is reported in the log."""

        def explode(change: ToolSetChange) -> None:
            raise RuntimeError("boom")

        registry = ToolRegistry()
        registry.subscribe(explode)

        registry.cache_from_records([{"name": "a"}])

        assert any("[registry] subscriber" in m and "failed" in m for m in messages)

    def test_silent_by_default(self) -> None:
        """Without opting in, the package emits nothing."""
        captured: list[str] = []
        handler_id = logger.add(lambda m: captured.append(m.record["message"]), level="DEBUG")
        try:
            DeferredToolManager().invalidate()
        finally:
            logger.remove(handler_id)

        assert captured == []

    def test_configure_logging_returns_handler_id(self) -> None:
        """configure_logging() hands back a removable loguru handler id."""
        handler_id = configure_logging("DEBUG")
        try:
            assert isinstance(handler_id, int)
        finally:
            logger.remove(handler_id)
            logger.disable(PACKAGE)
