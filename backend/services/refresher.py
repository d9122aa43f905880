"""Background poller that keeps the photo store in sync with the upstream source.

The upstream endpoint returns the full collection every time. New ids are
appended to the store; ids already present are skipped (first write wins).
Failures are logged and the cycle is abandoned until the next tick.
"""

import asyncio
import logging
import time
from typing import Any

import httpx

from errors import FetchError, MalformedPayloadError, RefreshError
from services.store import RecordStore

logger = logging.getLogger(__name__)


class Refresher:
    """Fetches the upstream collection into a store, once and then periodically."""

    def __init__(
        self,
        store: RecordStore,
        source_url: str,
        interval_seconds: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._store = store
        self._source_url = source_url
        self._interval = interval_seconds
        self._client = client
        self._task: asyncio.Task | None = None

        self.last_refreshed_at: float | None = None
        self.last_error: str | None = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def fetch(self) -> list[dict[str, Any]]:
        """Fetch the upstream collection.

        Raises:
            FetchError: connection, DNS, timeout or HTTP status failure.
            MalformedPayloadError: body is not a JSON array of objects.
        """
        try:
            if self._client is not None:
                resp = await self._client.get(self._source_url)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await client.get(self._source_url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(self._source_url, e) from e

        try:
            payload = resp.json()
        except (ValueError, RecursionError) as e:
            # Deeply nested bodies exhaust the decoder stack.
            raise MalformedPayloadError(f"invalid JSON ({e})") from e

        if not isinstance(payload, list):
            raise MalformedPayloadError(f"expected a JSON array, got {type(payload).__name__}")
        for index, record in enumerate(payload):
            if not isinstance(record, dict):
                raise MalformedPayloadError(
                    f"element {index} is {type(record).__name__}, expected an object"
                )
        return payload

    async def refresh(self) -> int:
        """Run one fetch-and-merge cycle. Returns the number of new records.

        Never raises: a failed cycle is logged and leaves the store unchanged.
        """
        try:
            records = await self.fetch()
        except RefreshError as e:
            self.last_error = str(e)
            logger.error("Refresh failed: %s", e)
            return 0
        except Exception as e:
            self.last_error = str(e) or type(e).__name__
            logger.exception("Unexpected refresh failure")
            return 0

        added = self._store.add_many(records)
        self.last_refreshed_at = time.time()
        self.last_error = None
        logger.info(
            "Data fetched. Total photos stored: %d (%d new of %d fetched)",
            len(self._store),
            added,
            len(records),
        )
        return added

    def start(self) -> asyncio.Task:
        """Start the periodic refresh loop in a background task."""
        if self.running:
            return self._task
        self._task = asyncio.create_task(self._run(), name="photo-refresher")
        logger.info("Refresher started (every %ss from %s)", self._interval, self._source_url)
        return self._task

    async def stop(self) -> None:
        """Cancel the refresh loop and wait for it to exit."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Refresher stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.refresh()
            except Exception:
                logger.exception("Refresh tick failed, retrying on next tick")
