"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationType(str, Enum):
    """Closed set of notification kinds emitted by the platform."""

    EVENT_APPROVAL_REQUEST = "event_approval_request"
    EVENT_SUBMITTED = "event_submitted"
    EVENT_APPROVED = "event_approved"
    EVENT_REJECTED = "event_rejected"
    PARTICIPATION_REQUEST = "participation_request"
    PARTICIPATION_ACCEPTED = "participation_accepted"
    PARTICIPATION_REJECTED = "participation_rejected"
    VOLUNTEER_JOINED = "volunteer_joined"
    POINTS_AWARDED = "points_awarded"
    BADGE_EARNED = "badge_earned"
    CERTIFICATE_AWARDED = "certificate_awarded"
    EVENT_COMPLETION_REQUEST = "event_completion_request"
    EVENT_COMPLETION_APPROVED = "event_completion_approved"
    EVENT_COMPLETION_REJECTED = "event_completion_rejected"


@dataclass(frozen=True)
class NotificationSender:
    """Snapshot of the user that triggered a notification."""

    id: int | None
    name: str
    profile_picture: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "profile_picture": self.profile_picture,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "NotificationSender | None":
        if not data or not data.get("name"):
            return None
        return cls(
            id=data.get("id"),
            name=str(data["name"]),
            profile_picture=data.get("profile_picture"),
        )


@dataclass
class Notification:
    """Information message delivered to a single recipient.

    Everything except ``read_at`` is fixed at creation time. ``read_at`` only
    ever moves from ``None`` to a timestamp.
    """

    id: int | None
    recipient_id: int
    type: NotificationType
    title: str
    message: str
    action_url: str | None = None
    sender: NotificationSender | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def read(self) -> bool:
        return self.read_at is not None


@dataclass(frozen=True)
class NotificationPage:
    """A window over a recipient's notifications plus the badge counters."""

    items: list[Notification]
    unread_count: int
    total: int


__all__ = [
    "Notification",
    "NotificationPage",
    "NotificationSender",
    "NotificationType",
]
