"""Periodic unread-count refresh bound to a mounted dropdown."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 30


class UnreadCountPoller:
    """Run ``fetch`` right away and then every ``interval`` seconds.

    A poll requested while another one is still in flight is skipped.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[None]],
        *,
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        self._fetch = fetch
        self._interval = interval
        self._task: asyncio.Task[None] | None = None
        self._in_flight = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="unread-count-poller")

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def poll_now(self) -> bool:
        """Fetch once; return ``False`` when collapsed into a running poll."""

        if self._in_flight:
            logger.debug("Unread count poll already in flight; skipping")
            return False
        self._in_flight = True
        try:
            await self._fetch()
        finally:
            self._in_flight = False
        return True

    async def _run(self) -> None:
        while True:
            try:
                await self.poll_now()
            except Exception:
                logger.exception("Unread count poll failed")
            await asyncio.sleep(self._interval)


__all__ = ["POLL_INTERVAL_SECONDS", "UnreadCountPoller"]
