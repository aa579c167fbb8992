"""Lookup tables and formatting used to render notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from impact_api.domain.entities import NotificationType

BADGE_CAP = 9


@dataclass(frozen=True)
class NotificationStyle:
    icon: str
    color: str


_REVIEW = NotificationStyle(icon="clock", color="#F9D71C")
_SUBMITTED = NotificationStyle(icon="upload", color="#7DD9A6")
_APPROVED = NotificationStyle(icon="check-circle", color="#4FC3DC")
_PEOPLE = NotificationStyle(icon="users", color="#7FD47F")
_REWARD = NotificationStyle(icon="star", color="#F9D71C")
_REJECTED = NotificationStyle(icon="x-circle", color="#EF4444")

NOTIFICATION_STYLES: dict[NotificationType, NotificationStyle] = {
    NotificationType.EVENT_APPROVAL_REQUEST: _REVIEW,
    NotificationType.EVENT_COMPLETION_REQUEST: _REVIEW,
    NotificationType.EVENT_SUBMITTED: _SUBMITTED,
    NotificationType.EVENT_APPROVED: _APPROVED,
    NotificationType.PARTICIPATION_ACCEPTED: _APPROVED,
    NotificationType.EVENT_COMPLETION_APPROVED: _APPROVED,
    NotificationType.PARTICIPATION_REQUEST: _PEOPLE,
    NotificationType.VOLUNTEER_JOINED: _PEOPLE,
    NotificationType.POINTS_AWARDED: _REWARD,
    NotificationType.BADGE_EARNED: _REWARD,
    NotificationType.CERTIFICATE_AWARDED: _REWARD,
    NotificationType.EVENT_REJECTED: _REJECTED,
    NotificationType.PARTICIPATION_REJECTED: _REJECTED,
    NotificationType.EVENT_COMPLETION_REJECTED: _REJECTED,
}

_missing = set(NotificationType) - set(NOTIFICATION_STYLES)
if _missing:
    raise RuntimeError(
        "No style registered for notification types: "
        + ", ".join(sorted(item.value for item in _missing))
    )


def style_for(notification_type: NotificationType | str) -> NotificationStyle:
    return NOTIFICATION_STYLES[NotificationType(notification_type)]


def badge_label(unread_count: int) -> str | None:
    """Text shown on the bell badge, ``None`` when the badge is hidden."""

    if unread_count <= 0:
        return None
    if unread_count > BADGE_CAP:
        return f"{BADGE_CAP}+"
    return str(unread_count)


def format_relative_time(created_at: datetime, *, now: datetime | None = None) -> str:
    """Describe ``created_at`` relative to ``now``, e.g. ``"5 minutes ago"``."""

    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    seconds = int((now - created_at).total_seconds())

    if seconds < 60:
        return "less than a minute ago"
    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        if seconds >= size:
            value = seconds // size
            if unit == "day" and value > 30:
                break
            return f"{value} {unit}{'s' if value != 1 else ''} ago"
    return created_at.strftime("%b %d, %Y")


__all__ = [
    "BADGE_CAP",
    "NOTIFICATION_STYLES",
    "NotificationStyle",
    "badge_label",
    "format_relative_time",
    "style_for",
]
