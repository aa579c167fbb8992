"""Notification helpers for each domain transition that informs a user.

Every helper emits exactly one notification per recipient. Helpers that
address administrators fan out explicitly, one ``emit`` call per admin.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from impact_api.domain.entities import (
    ROLE_ADMIN,
    Event,
    Notification,
    NotificationType,
    User,
)
from impact_api.infrastructure.repositories import UserRepository

from .emitter import emit, sender_snapshot


def event_url(event_id: int | None) -> str:
    return f"/events/{event_id}"


def _notify_admins(
    session: Session,
    *,
    type: NotificationType,
    title: str,
    message: str,
    action_url: str,
    event: Event,
    sender: User | None,
) -> list[Notification]:
    admins = UserRepository(session).list_active_by_role(ROLE_ADMIN)
    emitted: list[Notification] = []
    for admin in admins:
        notification = emit(
            session,
            recipient_id=admin.id,
            type=type,
            title=title,
            message=message,
            action_url=action_url,
            metadata={"event_id": event.id},
            sender=sender_snapshot(sender),
        )
        if notification is not None:
            emitted.append(notification)
    return emitted


def notify_admins_event_approval(
    session: Session, *, event: Event, organization: User
) -> list[Notification]:
    """Ask every administrator to review a newly submitted event."""

    return _notify_admins(
        session,
        type=NotificationType.EVENT_APPROVAL_REQUEST,
        title="New Event Approval Request",
        message=f'{organization.name} has submitted "{event.title}" for approval',
        action_url="/admin/pendingrequest",
        event=event,
        sender=organization,
    )


def notify_admins_event_completion(
    session: Session, *, event: Event, organization: User
) -> list[Notification]:
    """Ask every administrator to review an event completion claim."""

    return _notify_admins(
        session,
        type=NotificationType.EVENT_COMPLETION_REQUEST,
        title="Event Completion Review Request",
        message=f'{organization.name} has requested completion approval for "{event.title}"',
        action_url="/admin/eventendingreq",
        event=event,
        sender=organization,
    )


def notify_ngo_event_submitted(session: Session, *, event: Event) -> Notification | None:
    """Confirm to the organization that its event is awaiting review."""

    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.EVENT_SUBMITTED,
        title="Event Submitted",
        message=f'Your event "{event.title}" has been submitted for review',
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id},
    )


def notify_ngo_event_approved(session: Session, *, event: Event) -> Notification | None:
    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.EVENT_APPROVED,
        title="Event Approved",
        message=f'Your event "{event.title}" has been approved',
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id},
    )


def notify_ngo_event_rejected(
    session: Session, *, event: Event, reason: str | None = None
) -> Notification | None:
    message = f'Your event "{event.title}" was rejected.'
    if reason:
        message = f"{message} Reason: {reason}"
    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.EVENT_REJECTED,
        title="Event Rejected",
        message=message,
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id},
    )


def notify_ngo_event_completion_approved(
    session: Session, *, event: Event
) -> Notification | None:
    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.EVENT_COMPLETION_APPROVED,
        title="Event Completion Approved",
        message=f'Completion of "{event.title}" has been approved',
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id},
    )


def notify_ngo_event_completion_rejected(
    session: Session, *, event: Event, reason: str | None = None
) -> Notification | None:
    message = f'Completion of "{event.title}" was not approved.'
    if reason:
        message = f"{message} Reason: {reason}"
    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.EVENT_COMPLETION_REJECTED,
        title="Event Completion Rejected",
        message=message,
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id},
    )


def notify_ngo_participation_request(
    session: Session, *, event: Event, volunteer: User, request_id: int | None
) -> Notification | None:
    """Tell the event creator that a volunteer asked to join."""

    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.PARTICIPATION_REQUEST,
        title="New Participation Request",
        message=f'{volunteer.name} has requested to join "{event.title}"',
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id, "request_id": request_id},
        sender=sender_snapshot(volunteer),
    )


def notify_ngo_volunteer_joined(
    session: Session, *, event: Event, volunteer: User
) -> Notification | None:
    return emit(
        session,
        recipient_id=event.organization_id,
        type=NotificationType.VOLUNTEER_JOINED,
        title="Volunteer Joined Event",
        message=f'{volunteer.name} has joined "{event.title}"',
        action_url="/ngo-dashboard",
        metadata={"event_id": event.id},
        sender=sender_snapshot(volunteer),
    )


def notify_volunteer_participation_accepted(
    session: Session,
    *,
    volunteer_id: int,
    event: Event,
    request_id: int | None,
    decided_by: User | None = None,
) -> Notification | None:
    return emit(
        session,
        recipient_id=volunteer_id,
        type=NotificationType.PARTICIPATION_ACCEPTED,
        title="Participation Request Accepted",
        message=f'Your request to join "{event.title}" has been accepted',
        action_url=event_url(event.id),
        metadata={"event_id": event.id, "request_id": request_id},
        sender=sender_snapshot(decided_by),
    )


def notify_volunteer_participation_rejected(
    session: Session,
    *,
    volunteer_id: int,
    event: Event,
    request_id: int | None,
    reason: str | None = None,
    decided_by: User | None = None,
) -> Notification | None:
    message = f'Your request to join "{event.title}" has been rejected'
    if reason:
        message = f"{message}. Reason: {reason}"
    return emit(
        session,
        recipient_id=volunteer_id,
        type=NotificationType.PARTICIPATION_REJECTED,
        title="Participation Request Rejected",
        message=message,
        action_url=event_url(event.id),
        metadata={"event_id": event.id, "request_id": request_id},
        sender=sender_snapshot(decided_by),
    )


def notify_volunteer_points_awarded(
    session: Session, *, volunteer_id: int, event_id: int | None, event_title: str, points: int
) -> Notification | None:
    return emit(
        session,
        recipient_id=volunteer_id,
        type=NotificationType.POINTS_AWARDED,
        title="Points Awarded",
        message=f'You earned {points} points for completing "{event_title}"',
        action_url="/profile",
        metadata={"event_id": event_id, "points": points},
    )


def notify_volunteer_certificate_awarded(
    session: Session,
    *,
    volunteer_id: int,
    event: Event,
    certificate_url: str | None = None,
) -> Notification | None:
    return emit(
        session,
        recipient_id=volunteer_id,
        type=NotificationType.CERTIFICATE_AWARDED,
        title="Certificate Awarded",
        message=f'Your certificate for "{event.title}" is ready',
        action_url=certificate_url or "/profile",
        metadata={"event_id": event.id, "certificate_url": certificate_url},
    )


def notify_volunteer_badge_earned(
    session: Session, *, volunteer_id: int, badge_name: str
) -> Notification | None:
    return emit(
        session,
        recipient_id=volunteer_id,
        type=NotificationType.BADGE_EARNED,
        title="New Badge Earned",
        message=f'Congratulations! You earned the "{badge_name}" badge',
        action_url="/badges",
        metadata={"badge_name": badge_name},
    )
