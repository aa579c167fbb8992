"""Domain entities exposed by the application."""

from .event import (
    EVENT_STATUS_APPROVED,
    EVENT_STATUS_COMPLETED,
    EVENT_STATUS_PENDING,
    EVENT_STATUS_REJECTED,
    Event,
)
from .notification import (
    Notification,
    NotificationPage,
    NotificationSender,
    NotificationType,
)
from .participation_request import (
    MAX_REQUEST_TEXT_LENGTH,
    PARTICIPATION_DECISIONS,
    PARTICIPATION_STATUS_ACCEPTED,
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_REJECTED,
    ParticipationRequest,
)
from .user import (
    ROLE_ADMIN,
    ROLE_CORPORATE,
    ROLE_NGO,
    ROLE_VOLUNTEER,
    USER_ROLES,
    User,
)

__all__ = [
    "EVENT_STATUS_APPROVED",
    "EVENT_STATUS_COMPLETED",
    "EVENT_STATUS_PENDING",
    "EVENT_STATUS_REJECTED",
    "Event",
    "MAX_REQUEST_TEXT_LENGTH",
    "Notification",
    "NotificationPage",
    "NotificationSender",
    "NotificationType",
    "PARTICIPATION_DECISIONS",
    "PARTICIPATION_STATUS_ACCEPTED",
    "PARTICIPATION_STATUS_PENDING",
    "PARTICIPATION_STATUS_REJECTED",
    "ParticipationRequest",
    "ROLE_ADMIN",
    "ROLE_CORPORATE",
    "ROLE_NGO",
    "ROLE_VOLUNTEER",
    "USER_ROLES",
    "User",
]
