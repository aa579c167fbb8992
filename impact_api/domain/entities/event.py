"""Domain entity representing a volunteering event."""

from dataclasses import dataclass, field
from datetime import datetime

EVENT_STATUS_PENDING = "pending"
EVENT_STATUS_APPROVED = "approved"
EVENT_STATUS_REJECTED = "rejected"
EVENT_STATUS_COMPLETED = "completed"


@dataclass
class Event:
    """Subset of event attributes used by the participation workflow."""

    id: int | None
    title: str
    organization_id: int
    date: datetime
    status: str
    max_participants: int
    points_offered: int = 0
    participant_ids: list[int] = field(default_factory=list)

    def is_full(self) -> bool:
        return len(self.participant_ids) >= self.max_participants

    def has_participant(self, user_id: int) -> bool:
        return user_id in self.participant_ids


__all__ = [
    "EVENT_STATUS_APPROVED",
    "EVENT_STATUS_COMPLETED",
    "EVENT_STATUS_PENDING",
    "EVENT_STATUS_REJECTED",
    "Event",
]
