from .auth import Token
from .base import CamelModel, MessageResponse
from .notification import (
    NotificationListResponse,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationSenderRead,
    UnreadCountResponse,
)
from .participation_request import (
    ParticipationRequestCreate,
    ParticipationRequestListResponse,
    ParticipationRequestRead,
    ParticipationRequestResponse,
    ParticipationRequestStats,
    ParticipationRequestStatsResponse,
    ParticipationStatusUpdate,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "NotificationListResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationSenderRead",
    "ParticipationRequestCreate",
    "ParticipationRequestListResponse",
    "ParticipationRequestRead",
    "ParticipationRequestResponse",
    "ParticipationRequestStats",
    "ParticipationRequestStatsResponse",
    "ParticipationStatusUpdate",
    "Token",
    "UnreadCountResponse",
]
