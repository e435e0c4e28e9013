"""Debounced search-as-you-type over the wedding catalog.

Each ``update`` restarts the delay; the filter is only evaluated once the
input has been quiet for ``delay`` seconds. ``close`` drops any pending
evaluation, so nothing runs after the consumer has gone away.
"""

import asyncio
from collections.abc import Awaitable, Callable

import structlog

from weddingwander.config import settings
from weddingwander.weddings.schemas import WeddingFilter, WeddingResponse
from weddingwander.weddings.service import WeddingService

logger = structlog.get_logger()

ResultsCallback = Callable[[list[WeddingResponse]], Awaitable[None]]


class LiveSearch:
    def __init__(
        self,
        service: WeddingService,
        on_results: ResultsCallback | None = None,
        delay: float | None = None,
        filters: WeddingFilter | None = None,
    ) -> None:
        self._service = service
        self._on_results = on_results
        self._delay = settings.search_debounce_seconds if delay is None else delay
        self._filters = filters or WeddingFilter()
        self._pending: asyncio.Task | None = None
        self._results: list[WeddingResponse] = []
        self._closed = False

    @property
    def results(self) -> list[WeddingResponse]:
        return self._results

    @property
    def closed(self) -> bool:
        return self._closed

    def update(self, search: str) -> None:
        if self._closed:
            raise RuntimeError("LiveSearch is closed")

        self._filters = self._filters.model_copy(update={"search": search or None})
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.create_task(self._evaluate_later(self._filters))
        self._pending.add_done_callback(self._log_failure)

    async def wait(self) -> list[WeddingResponse]:
        """Block until the latest scheduled evaluation has finished."""
        while self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})
        if self._pending is not None and not self._pending.cancelled():
            self._pending.result()
        return self._results

    def close(self) -> None:
        self._closed = True
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def _log_failure(self, task: asyncio.Task) -> None:
        if task.cancelled() or task.exception() is None:
            return
        logger.warning("live_search_failed", error=repr(task.exception()))

    async def _evaluate_later(self, filters: WeddingFilter) -> None:
        await asyncio.sleep(self._delay)
        self._results = await self._service.filter(filters)
        logger.debug("live_search_evaluated", search=filters.search, matched=len(self._results))
        if self._on_results is not None:
            await self._on_results(self._results)
