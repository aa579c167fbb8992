"""Domain entity representing a request to join an event."""

from dataclasses import dataclass
from datetime import datetime

PARTICIPATION_STATUS_PENDING = "pending"
PARTICIPATION_STATUS_ACCEPTED = "accepted"
PARTICIPATION_STATUS_REJECTED = "rejected"

PARTICIPATION_DECISIONS = (
    PARTICIPATION_STATUS_ACCEPTED,
    PARTICIPATION_STATUS_REJECTED,
)

MAX_REQUEST_TEXT_LENGTH = 500


@dataclass
class ParticipationRequest:
    """A volunteer's request to take part in an event.

    ``pending`` is the only non-terminal status.
    """

    id: int | None
    event_id: int
    user_id: int
    event_creator_id: int
    status: str
    message: str | None
    rejection_reason: str | None
    created_at: datetime | None
    updated_at: datetime | None

    def is_pending(self) -> bool:
        return self.status == PARTICIPATION_STATUS_PENDING


__all__ = [
    "MAX_REQUEST_TEXT_LENGTH",
    "PARTICIPATION_DECISIONS",
    "PARTICIPATION_STATUS_ACCEPTED",
    "PARTICIPATION_STATUS_PENDING",
    "PARTICIPATION_STATUS_REJECTED",
    "ParticipationRequest",
]
