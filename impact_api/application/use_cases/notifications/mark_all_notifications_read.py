"""Use case for clearing the unread badge in one go."""

from sqlalchemy.orm import Session

from impact_api.infrastructure.repositories import NotificationRepository


def mark_all_notifications_read(session: Session, recipient_id: int) -> int:
    """Mark every unread notification of ``recipient_id`` as read."""

    return NotificationRepository(session).mark_all_as_read(recipient_id=recipient_id)
