"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from impact_api.domain.entities import NotificationType

from .base import CamelModel


class NotificationMarkReadRequest(CamelModel):
    """Payload used to mark a batch of notifications as read."""

    notification_ids: list[int] = Field(..., description="Notification identifiers")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        unique: list[int] = []
        seen: set[int] = set()
        for notification_id in self.notification_ids:
            if notification_id in seen:
                continue
            seen.add(notification_id)
            unique.append(notification_id)
        return unique


class NotificationSenderRead(CamelModel):
    id: int | None = None
    name: str
    profile_picture: str | None = None


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int
    type: NotificationType
    title: str
    message: str
    read: bool
    created_at: datetime
    action_url: str | None = None
    sender: NotificationSenderRead | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class NotificationListResponse(CamelModel):
    success: bool = True
    data: list[NotificationRead]
    unread_count: int
    total: int


class UnreadCountResponse(CamelModel):
    success: bool = True
    count: int


__all__ = [
    "NotificationListResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationSenderRead",
    "UnreadCountResponse",
]
