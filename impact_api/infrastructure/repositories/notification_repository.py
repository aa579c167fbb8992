"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Iterable

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from impact_api.domain.entities import Notification, NotificationSender, NotificationType
from impact_api.infrastructure.models import NotificationModel
from impact_api.utils import from_storage_datetime, storage_now, to_storage_datetime


class NotificationRepository:
    """Provide storage operations for :class:`Notification` objects.

    Every query is scoped to a single recipient; callers never see rows owned
    by somebody else.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        limit: int | None = 20,
        skip: int = 0,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        query = select(NotificationModel).where(NotificationModel.recipient_id == recipient_id)
        if unread_only:
            query = query.where(NotificationModel.read_at.is_(None))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in self.session.scalars(query).all()]

    def count_for_recipient(self, recipient_id: int, *, unread_only: bool = False) -> int:
        query = (
            select(func.count())
            .select_from(NotificationModel)
            .where(NotificationModel.recipient_id == recipient_id)
        )
        if unread_only:
            query = query.where(NotificationModel.read_at.is_(None))
        return int(self.session.scalar(query) or 0)

    def count_unread(self, recipient_id: int) -> int:
        return self.count_for_recipient(recipient_id, unread_only=True)

    def get(self, notification_id: int, *, recipient_id: int) -> Notification | None:
        model = self.session.scalar(
            select(NotificationModel).where(
                NotificationModel.id == notification_id,
                NotificationModel.recipient_id == recipient_id,
            )
        )
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Iterable[int], *, recipient_id: int) -> int:
        """Flag the given notifications as read and return how many changed.

        Identifiers that are unknown, already read or owned by another
        recipient are ignored.
        """

        ids = {notification_id for notification_id in notification_ids if notification_id is not None}
        if not ids:
            return 0
        result = self.session.execute(
            update(NotificationModel)
            .where(
                NotificationModel.id.in_(ids),
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.read_at.is_(None),
            )
            .values(read_at=storage_now())
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    def mark_all_as_read(self, *, recipient_id: int) -> int:
        result = self.session.execute(
            update(NotificationModel)
            .where(
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.read_at.is_(None),
            )
            .values(read_at=storage_now())
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    def delete(self, notification_id: int, *, recipient_id: int) -> bool:
        result = self.session.execute(
            delete(NotificationModel)
            .where(
                NotificationModel.id == notification_id,
                NotificationModel.recipient_id == recipient_id,
            )
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return bool(result.rowcount)

    def delete_read(self, *, recipient_id: int) -> int:
        result = self.session.execute(
            delete(NotificationModel)
            .where(
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.read_at.is_not(None),
            )
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    def delete_created_before(self, cutoff: datetime) -> int:
        result = self.session.execute(
            delete(NotificationModel)
            .where(NotificationModel.created_at < to_storage_datetime(cutoff))
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount or 0

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.created_at = to_storage_datetime(notification.created_at) or storage_now()
        model.recipient_id = notification.recipient_id
        model.type = NotificationType(notification.type).value
        model.title = notification.title
        model.message = notification.message
        model.action_url = notification.action_url
        model.sender = notification.sender.as_dict() if notification.sender else None
        model.payload = notification.metadata or {}
        model.read_at = to_storage_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=NotificationType(model.type),
            title=model.title,
            message=model.message,
            action_url=model.action_url,
            sender=NotificationSender.from_dict(model.sender),
            metadata=model.payload or {},
            created_at=from_storage_datetime(model.created_at),
            read_at=from_storage_datetime(model.read_at),
        )


__all__ = ["NotificationRepository"]
