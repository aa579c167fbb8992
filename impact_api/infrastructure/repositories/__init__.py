"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .notification_repository import NotificationRepository
from .participation_request_repository import ParticipationRequestRepository
from .user_repository import UserRepository

__all__ = [
    "EventRepository",
    "NotificationRepository",
    "ParticipationRequestRepository",
    "UserRepository",
]
