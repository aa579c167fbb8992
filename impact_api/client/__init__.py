"""Client side of the notification inbox: API client, poller and dropdown."""

from .api import NotificationApiError, NotificationsApiClient
from .dropdown import PAGE_SIZE, DropdownState, NotificationDropdown
from .poller import POLL_INTERVAL_SECONDS, UnreadCountPoller
from .presentation import (
    NOTIFICATION_STYLES,
    NotificationStyle,
    badge_label,
    format_relative_time,
    style_for,
)

__all__ = [
    "DropdownState",
    "NOTIFICATION_STYLES",
    "NotificationApiError",
    "NotificationDropdown",
    "NotificationStyle",
    "NotificationsApiClient",
    "PAGE_SIZE",
    "POLL_INTERVAL_SECONDS",
    "UnreadCountPoller",
    "badge_label",
    "format_relative_time",
    "style_for",
]
