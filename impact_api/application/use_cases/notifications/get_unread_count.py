"""Use case for the unread badge counter."""

from sqlalchemy.orm import Session

from impact_api.infrastructure.repositories import NotificationRepository


def get_unread_count(session: Session, recipient_id: int) -> int:
    """Return how many notifications of ``recipient_id`` are still unread."""

    return NotificationRepository(session).count_unread(recipient_id)
