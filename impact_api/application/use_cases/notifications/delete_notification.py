"""Use cases for removing notifications."""

from sqlalchemy.orm import Session

from impact_api.domain.errors import NotificationNotFoundError
from impact_api.infrastructure.repositories import NotificationRepository


def delete_notification(session: Session, recipient_id: int, notification_id: int) -> None:
    """Permanently delete one notification owned by ``recipient_id``."""

    if not NotificationRepository(session).delete(notification_id, recipient_id=recipient_id):
        raise NotificationNotFoundError(notification_id)


def delete_read_notifications(session: Session, recipient_id: int) -> int:
    """Delete every read notification of ``recipient_id`` and return the count."""

    return NotificationRepository(session).delete_read(recipient_id=recipient_id)
