"""Single entry point used by domain operations to create notifications."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from impact_api.domain.entities import (
    Notification,
    NotificationSender,
    NotificationType,
    User,
)
from impact_api.infrastructure.repositories import NotificationRepository
from impact_api.utils import utc_now

logger = logging.getLogger(__name__)


def sender_snapshot(user: User | None) -> NotificationSender | None:
    """Freeze the display attributes of ``user`` for a notification."""

    if user is None:
        return None
    return NotificationSender(id=user.id, name=user.name, profile_picture=user.profile_picture)


def emit(
    session: Session,
    *,
    recipient_id: int,
    type: NotificationType,
    title: str,
    message: str,
    action_url: str | None = None,
    metadata: dict[str, Any] | None = None,
    sender: NotificationSender | None = None,
) -> Notification | None:
    """Append one notification for ``recipient_id``.

    Emission is fire-and-forget: a storage failure is logged and ``None`` is
    returned so the business operation that triggered it still succeeds.
    Fan-out to several recipients is the caller's job.
    """

    notification = Notification(
        id=None,
        recipient_id=recipient_id,
        type=NotificationType(type),
        title=title,
        message=message,
        action_url=action_url,
        sender=sender,
        metadata={key: value for key, value in (metadata or {}).items() if value is not None},
        created_at=utc_now(),
        read_at=None,
    )
    try:
        saved = NotificationRepository(session).create(notification)
    except SQLAlchemyError:
        session.rollback()
        logger.exception(
            "Could not store %s notification for user %s", notification.type.value, recipient_id
        )
        return None

    logger.debug(
        "Notification %s (%s) stored for user %s", saved.id, saved.type.value, recipient_id
    )
    return saved


__all__ = ["emit", "sender_snapshot"]
