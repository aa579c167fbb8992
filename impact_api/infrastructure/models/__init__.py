"""ORM models used by the application infrastructure."""

from .user import UserModel
from .event import EventModel, event_participant_table
from .notification import NotificationModel
from .participation_request import ParticipationRequestModel

__all__ = [
    "EventModel",
    "NotificationModel",
    "ParticipationRequestModel",
    "UserModel",
    "event_participant_table",
]
