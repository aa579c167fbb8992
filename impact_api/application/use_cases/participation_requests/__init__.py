"""Use cases for the participation request workflow."""

from .cancel_participation_request import cancel_participation_request
from .create_participation_request import create_participation_request
from .list_participation_requests import (
    get_participation_request_stats,
    list_requests_by_user,
    list_requests_for_creator,
    list_requests_for_event,
)
from .update_participation_request_status import update_participation_request_status

__all__ = [
    "cancel_participation_request",
    "create_participation_request",
    "get_participation_request_stats",
    "list_requests_by_user",
    "list_requests_for_creator",
    "list_requests_for_event",
    "update_participation_request_status",
]
