"""Endpoints exposing the notification inbox of the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from impact_api.application.use_cases.notifications import (
    DEFAULT_LIMIT,
    delete_notification,
    delete_read_notifications,
    get_unread_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
)
from impact_api.domain.entities import Notification, User
from impact_api.domain.errors import NotificationNotFoundError
from impact_api.infrastructure.database import get_db
from impact_api.interfaces.api.dependencies import get_current_active_user
from impact_api.interfaces.api.routes_helpers import http_error_for
from impact_api.interfaces.api.schemas import (
    MessageResponse,
    NotificationListResponse,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationSenderRead,
    UnreadCountResponse,
)

router = APIRouter(prefix="/v1/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    sender = None
    if notification.sender is not None:
        sender = NotificationSenderRead(
            id=notification.sender.id,
            name=notification.sender.name,
            profile_picture=notification.sender.profile_picture,
        )
    return NotificationRead(
        id=notification.id or 0,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        read=notification.read,
        created_at=notification.created_at,
        action_url=notification.action_url,
        sender=sender,
        metadata=notification.metadata or {},
    )


@router.get("", response_model=NotificationListResponse)
def list_my_notifications(
    limit: int = Query(DEFAULT_LIMIT),
    skip: int = Query(0),
    unread_only: bool = Query(False, alias="unreadOnly"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the newest notifications together with the unread counter."""

    page = list_notifications(
        db, current_user.id, limit=limit, skip=skip, unread_only=unread_only
    )
    return NotificationListResponse(
        data=[_notification_to_schema(item) for item in page.items],
        unread_count=page.unread_count,
        total=page.total,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountResponse:
    return UnreadCountResponse(count=get_unread_count(db, current_user.id))


@router.put("/mark-read", response_model=MessageResponse)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    """Mark the given notifications as read; already read ones are ignored."""

    updated = mark_notifications_read(db, current_user.id, payload.unique_ids())
    return MessageResponse(message=f"{updated} notification(s) marked as read")


@router.put("/mark-all-read", response_model=MessageResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    updated = mark_all_notifications_read(db, current_user.id)
    return MessageResponse(message=f"{updated} notification(s) marked as read")


@router.delete("/read/all", response_model=MessageResponse)
def delete_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    deleted = delete_read_notifications(db, current_user.id)
    return MessageResponse(message=f"{deleted} read notification(s) deleted")


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_one(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    try:
        delete_notification(db, current_user.id, notification_id)
    except NotificationNotFoundError as exc:
        raise http_error_for(exc) from exc
    return MessageResponse(message="Notification deleted")
