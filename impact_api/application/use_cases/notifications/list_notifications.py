"""Use case for listing a recipient's notifications."""

from sqlalchemy.orm import Session

from impact_api.domain.entities import NotificationPage
from impact_api.infrastructure.repositories import NotificationRepository

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def list_notifications(
    session: Session,
    recipient_id: int,
    *,
    limit: int = DEFAULT_LIMIT,
    skip: int = 0,
    unread_only: bool = False,
) -> NotificationPage:
    """Return the newest notifications of ``recipient_id`` with its counters.

    ``limit`` is clamped to ``[1, MAX_LIMIT]`` and ``skip`` to non-negative
    values. ``total`` counts the rows matching the filter, ``unread_count``
    always counts every unread row of the recipient.
    """

    limit = max(1, min(limit, MAX_LIMIT))
    skip = max(0, skip)

    repository = NotificationRepository(session)
    items = list(
        repository.list_for_recipient(
            recipient_id, limit=limit, skip=skip, unread_only=unread_only
        )
    )
    return NotificationPage(
        items=items,
        unread_count=repository.count_unread(recipient_id),
        total=repository.count_for_recipient(recipient_id, unread_only=unread_only),
    )
