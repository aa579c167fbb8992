"""Public helpers for emitting and managing notifications."""

from .delete_notification import delete_notification, delete_read_notifications
from .emitter import emit, sender_snapshot
from .events import (
    notify_admins_event_approval,
    notify_admins_event_completion,
    notify_ngo_event_approved,
    notify_ngo_event_completion_approved,
    notify_ngo_event_completion_rejected,
    notify_ngo_event_rejected,
    notify_ngo_event_submitted,
    notify_ngo_participation_request,
    notify_ngo_volunteer_joined,
    notify_volunteer_badge_earned,
    notify_volunteer_certificate_awarded,
    notify_volunteer_participation_accepted,
    notify_volunteer_participation_rejected,
    notify_volunteer_points_awarded,
)
from .get_unread_count import get_unread_count
from .list_notifications import DEFAULT_LIMIT, MAX_LIMIT, list_notifications
from .mark_all_notifications_read import mark_all_notifications_read
from .mark_notifications_read import mark_notifications_read
from .purge_expired_notifications import purge_expired_notifications

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "delete_notification",
    "delete_read_notifications",
    "emit",
    "get_unread_count",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notifications_read",
    "notify_admins_event_approval",
    "notify_admins_event_completion",
    "notify_ngo_event_approved",
    "notify_ngo_event_completion_approved",
    "notify_ngo_event_completion_rejected",
    "notify_ngo_event_rejected",
    "notify_ngo_event_submitted",
    "notify_ngo_participation_request",
    "notify_ngo_volunteer_joined",
    "notify_volunteer_badge_earned",
    "notify_volunteer_certificate_awarded",
    "notify_volunteer_participation_accepted",
    "notify_volunteer_participation_rejected",
    "notify_volunteer_points_awarded",
    "purge_expired_notifications",
    "sender_snapshot",
]
