"""State machine behind the notification bell and its dropdown list.

Local state is always patched optimistically and then reconciled with the
server. Each request takes a sequence stamp when it starts; responses older
than the last state applied for the badge or for the list are dropped.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from impact_api.interfaces.api.schemas import NotificationRead

from .api import NotificationApiError, NotificationsApiClient
from .poller import POLL_INTERVAL_SECONDS, UnreadCountPoller
from .presentation import badge_label

logger = logging.getLogger(__name__)

PAGE_SIZE = 10

_BADGE = "badge"
_LIST = "list"


class DropdownState(str, Enum):
    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"


@dataclass
class _Snapshot:
    stamp: int
    notifications: list[NotificationRead]
    unread_count: int


class NotificationDropdown:
    """Client-side view of the recipient's inbox for one mounted session."""

    def __init__(
        self,
        api: NotificationsApiClient,
        *,
        navigate: Callable[[str], None] | None = None,
        poll_interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        self.api = api
        self.state = DropdownState.CLOSED
        self.notifications: list[NotificationRead] = []
        self.unread_count = 0
        self._navigate = navigate
        self._poller = UnreadCountPoller(self.refresh_unread_count, interval=poll_interval)
        self._stamps = itertools.count(1)
        self._applied = {_BADGE: 0, _LIST: 0}
        self._pending_lists = 0

    @property
    def loading(self) -> bool:
        return self._pending_lists > 0

    @property
    def is_open(self) -> bool:
        return self.state is not DropdownState.CLOSED

    @property
    def badge(self) -> str | None:
        return badge_label(self.unread_count)

    @property
    def polling(self) -> bool:
        return self._poller.running

    def mount(self) -> None:
        """Start polling once an authenticated session exists."""

        self._poller.start()

    async def unmount(self) -> None:
        await self._poller.stop()
        self.state = DropdownState.CLOSED

    async def poll(self) -> bool:
        return await self._poller.poll_now()

    async def refresh_unread_count(self) -> None:
        stamp = next(self._stamps)
        try:
            count = await self.api.unread_count()
        except NotificationApiError:
            logger.exception("Error fetching unread notification count")
            return
        if self._accept(_BADGE, stamp):
            self.unread_count = count

    async def refresh_list(self) -> None:
        stamp = next(self._stamps)
        self._pending_lists += 1
        try:
            page = await self.api.list_notifications(limit=PAGE_SIZE)
        except NotificationApiError:
            logger.exception("Error fetching notifications")
            return
        finally:
            self._pending_lists -= 1

        if self._accept(_LIST, stamp):
            self.notifications = list(page.data)
        else:
            logger.debug("Discarding stale notification list (stamp %s)", stamp)
        if self._accept(_BADGE, stamp):
            self.unread_count = page.unread_count

    async def open(self) -> None:
        if self.is_open:
            return
        self.state = DropdownState.OPENING
        await self.refresh_list()
        if self.state is DropdownState.OPENING:
            self.state = DropdownState.OPEN

    def close(self) -> None:
        self.state = DropdownState.CLOSED

    async def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            await self.open()

    async def click(self, notification_id: int) -> None:
        """Mark the item read and follow its action URL when it has one."""

        item = self._find(notification_id)
        if item is None:
            logger.warning("Clicked notification %s is not loaded", notification_id)
            return

        snapshot = None
        if not item.read:
            snapshot = self._apply_optimistic(lambda: self._mark_item_read(item))

        if item.action_url:
            self.close()
            if self._navigate is not None:
                self._navigate(item.action_url)

        if snapshot is not None:
            await self._commit(
                snapshot,
                lambda: self.api.mark_read([notification_id]),
                "mark notification as read",
            )

    async def mark_all_read(self) -> None:
        if self.unread_count <= 0:
            return

        def mutate() -> None:
            for item in self.notifications:
                item.read = True
            self.unread_count = 0

        snapshot = self._apply_optimistic(mutate)
        await self._commit(snapshot, self.api.mark_all_read, "mark all notifications as read")

    async def delete(self, notification_id: int) -> None:
        item = self._find(notification_id)

        def mutate() -> None:
            self.notifications = [n for n in self.notifications if n.id != notification_id]
            if item is not None and not item.read:
                self.unread_count = max(0, self.unread_count - 1)

        snapshot = self._apply_optimistic(mutate)
        await self._commit(
            snapshot, lambda: self.api.delete(notification_id), "delete notification"
        )

    def _find(self, notification_id: int) -> NotificationRead | None:
        return next((n for n in self.notifications if n.id == notification_id), None)

    def _mark_item_read(self, item: NotificationRead) -> None:
        item.read = True
        self.unread_count = max(0, self.unread_count - 1)

    def _accept(self, key: str, stamp: int) -> bool:
        if stamp < self._applied[key]:
            return False
        self._applied[key] = stamp
        return True

    def _apply_optimistic(self, mutate: Callable[[], None]) -> _Snapshot:
        snapshot = _Snapshot(
            stamp=next(self._stamps),
            notifications=[item.model_copy() for item in self.notifications],
            unread_count=self.unread_count,
        )
        mutate()
        self._applied[_LIST] = self._applied[_BADGE] = snapshot.stamp
        return snapshot

    def _rollback(self, snapshot: _Snapshot) -> None:
        # Only undo pieces of state nothing newer has replaced since.
        if self._applied[_LIST] == snapshot.stamp:
            self.notifications = snapshot.notifications
        if self._applied[_BADGE] == snapshot.stamp:
            self.unread_count = snapshot.unread_count

    async def _commit(
        self,
        snapshot: _Snapshot,
        request: Callable[[], Awaitable[None]],
        description: str,
    ) -> bool:
        try:
            await request()
        except NotificationApiError:
            logger.exception("Could not %s; restoring previous state", description)
            self._rollback(snapshot)
            return False
        await self.refresh_list()
        return True


__all__ = ["DropdownState", "NotificationDropdown", "PAGE_SIZE"]
