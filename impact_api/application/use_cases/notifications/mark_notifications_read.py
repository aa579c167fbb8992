"""Use case for marking a batch of notifications as read."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from impact_api.infrastructure.repositories import NotificationRepository


def mark_notifications_read(
    session: Session, recipient_id: int, notification_ids: Iterable[int]
) -> int:
    """Mark ``notification_ids`` as read for ``recipient_id``.

    The operation is idempotent: repeating it, or passing ids that are already
    read or belong to someone else, is a no-op rather than an error. Returns
    the number of notifications whose state changed.
    """

    return NotificationRepository(session).mark_as_read(
        notification_ids, recipient_id=recipient_id
    )
