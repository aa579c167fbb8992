"""Tests for notification emission helpers."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from impact_api.application.use_cases.notifications import (
    emit,
    list_notifications,
    notify_admins_event_approval,
    notify_ngo_event_rejected,
    notify_ngo_participation_request,
    notify_volunteer_badge_earned,
)
from impact_api.application.use_cases.notifications import emitter as emitter_module
from impact_api.application.use_cases.users import award_points
from impact_api.domain.entities import ROLE_ADMIN, NotificationType
from impact_api.infrastructure.repositories import UserRepository


def test_emit_stores_sender_snapshot_and_drops_empty_metadata(session, volunteer, ngo) -> None:
    notification = emit(
        session,
        recipient_id=ngo.id,
        type=NotificationType.VOLUNTEER_JOINED,
        title="Volunteer Joined Event",
        message="Vera joined",
        action_url="/ngo-dashboard",
        metadata={"event_id": 7, "request_id": None},
        sender=emitter_module.sender_snapshot(volunteer),
    )

    assert notification is not None
    assert notification.id is not None
    assert notification.read is False
    assert notification.metadata == {"event_id": 7}
    assert notification.sender.name == "Vera Volunteer"

    (stored,) = list_notifications(session, ngo.id).items
    assert stored.sender.id == volunteer.id
    assert stored.action_url == "/ngo-dashboard"


def test_emit_failure_is_logged_and_swallowed(session, volunteer, monkeypatch, caplog) -> None:
    def broken_create(self, notification):
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(emitter_module.NotificationRepository, "create", broken_create)

    with caplog.at_level("ERROR"):
        result = notify_volunteer_badge_earned(
            session, volunteer_id=volunteer.id, badge_name="First Steps"
        )

    assert result is None
    assert "Could not store badge_earned notification" in caplog.text


def test_admin_fan_out_emits_one_notification_per_active_admin(
    session, make_user, make_event, ngo
) -> None:
    first_admin = make_user("Ada", role=ROLE_ADMIN)
    second_admin = make_user("Bob", role=ROLE_ADMIN)
    inactive_admin = make_user("Cy", role=ROLE_ADMIN, is_active=False)
    event = make_event(ngo, title="River Cleanup", status="pending")

    emitted = notify_admins_event_approval(session, event=event, organization=ngo)

    assert sorted(n.recipient_id for n in emitted) == sorted([first_admin.id, second_admin.id])
    assert list_notifications(session, inactive_admin.id).total == 0
    (notification,) = list_notifications(session, first_admin.id).items
    assert notification.type is NotificationType.EVENT_APPROVAL_REQUEST
    assert notification.message == 'Green Earth has submitted "River Cleanup" for approval'
    assert notification.sender.name == "Green Earth"


def test_rejection_reason_is_part_of_the_message(session, make_event, ngo) -> None:
    event = make_event(ngo, title="Tree Planting", status="pending")

    notification = notify_ngo_event_rejected(session, event=event, reason="Missing venue")

    assert notification.message == 'Your event "Tree Planting" was rejected. Reason: Missing venue'


def test_participation_request_notification_targets_event_creator(
    session, make_event, ngo, volunteer
) -> None:
    event = make_event(ngo)

    notification = notify_ngo_participation_request(
        session, event=event, volunteer=volunteer, request_id=3
    )

    assert notification.recipient_id == ngo.id
    assert notification.metadata == {"event_id": event.id, "request_id": 3}


def test_award_points_credits_user_and_notifies(session, volunteer) -> None:
    user = award_points(
        session, user_id=volunteer.id, points=25, event_id=4, event_title="Food Drive"
    )

    assert user.points == 25
    assert UserRepository(session).get(volunteer.id).points == 25
    (notification,) = list_notifications(session, volunteer.id).items
    assert notification.type is NotificationType.POINTS_AWARDED
    assert notification.message == 'You earned 25 points for completing "Food Drive"'
    assert notification.metadata == {"event_id": 4, "points": 25}


def test_award_points_rejects_non_positive_amounts(session, volunteer) -> None:
    with pytest.raises(ValueError):
        award_points(session, user_id=volunteer.id, points=0, event_id=None, event_title="X")
