"""Use case enforcing the notification retention window."""

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from impact_api.config import get_settings
from impact_api.infrastructure.repositories import NotificationRepository
from impact_api.utils import utc_now

logger = logging.getLogger(__name__)


def purge_expired_notifications(
    session: Session,
    *,
    retention_days: int | None = None,
    now: datetime | None = None,
) -> int:
    """Delete notifications older than the retention window.

    ``retention_days`` defaults to ``NOTIFICATION_RETENTION_DAYS``.
    """

    if retention_days is None:
        retention_days = get_settings().notification_retention_days
    if retention_days <= 0:
        raise ValueError("retention_days must be positive")

    cutoff = (now or utc_now()) - timedelta(days=retention_days)
    removed = NotificationRepository(session).delete_created_before(cutoff)
    logger.info("Purged %s notifications created before %s", removed, cutoff.isoformat())
    return removed
