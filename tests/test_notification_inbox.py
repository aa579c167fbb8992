"""Tests for the notification inbox use cases."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from impact_api.application.use_cases.notifications import (
    delete_notification,
    delete_read_notifications,
    emit,
    get_unread_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notifications_read,
    purge_expired_notifications,
)
from impact_api.domain.entities import Notification, NotificationType
from impact_api.domain.errors import NotificationNotFoundError
from impact_api.config import reset_settings_cache
from impact_api.infrastructure.repositories import NotificationRepository


def _emit_many(session, recipient_id: int, count: int) -> list[Notification]:
    return [
        emit(
            session,
            recipient_id=recipient_id,
            type=NotificationType.BADGE_EARNED,
            title=f"Badge {index}",
            message=f"You earned badge {index}",
        )
        for index in range(count)
    ]


def test_list_is_newest_first_with_counters(session, volunteer) -> None:
    created = _emit_many(session, volunteer.id, 3)

    page = list_notifications(session, volunteer.id)

    assert [item.id for item in page.items] == [n.id for n in reversed(created)]
    assert page.unread_count == 3
    assert page.total == 3
    assert all(item.read is False for item in page.items)


def test_list_clamps_limit_and_filters_unread(session, volunteer) -> None:
    created = _emit_many(session, volunteer.id, 4)
    mark_notifications_read(session, volunteer.id, [created[0].id])

    assert len(list_notifications(session, volunteer.id, limit=0).items) == 1
    assert len(list_notifications(session, volunteer.id, limit=1000).items) == 4

    unread = list_notifications(session, volunteer.id, unread_only=True)
    assert created[0].id not in [item.id for item in unread.items]
    assert unread.total == 3

    skipped = list_notifications(session, volunteer.id, limit=2, skip=2)
    assert [item.id for item in skipped.items] == [created[1].id, created[0].id]


def test_recipients_only_see_their_own_notifications(session, volunteer, ngo) -> None:
    _emit_many(session, volunteer.id, 2)
    _emit_many(session, ngo.id, 1)

    assert list_notifications(session, ngo.id).total == 1
    assert get_unread_count(session, volunteer.id) == 2


def test_mark_read_is_idempotent(session, volunteer) -> None:
    first, second = _emit_many(session, volunteer.id, 2)

    assert mark_notifications_read(session, volunteer.id, [first.id]) == 1
    assert mark_notifications_read(session, volunteer.id, [first.id]) == 0
    assert get_unread_count(session, volunteer.id) == 1

    stored = NotificationRepository(session).get(first.id, recipient_id=volunteer.id)
    assert stored.read is True
    assert stored.read_at is not None


def test_mark_read_ignores_notifications_of_other_users(session, volunteer, ngo) -> None:
    (foreign,) = _emit_many(session, ngo.id, 1)

    assert mark_notifications_read(session, volunteer.id, [foreign.id]) == 0
    assert get_unread_count(session, ngo.id) == 1


def test_mark_read_with_no_ids_is_a_noop(session, volunteer) -> None:
    _emit_many(session, volunteer.id, 1)

    assert mark_notifications_read(session, volunteer.id, []) == 0
    assert get_unread_count(session, volunteer.id) == 1


def test_mark_all_read_sets_unread_count_to_zero(session, volunteer) -> None:
    _emit_many(session, volunteer.id, 5)

    assert mark_all_notifications_read(session, volunteer.id) == 5
    page = list_notifications(session, volunteer.id)

    assert page.unread_count == 0
    assert all(item.read for item in page.items)
    assert mark_all_notifications_read(session, volunteer.id) == 0


def test_delete_unread_notification_decrements_count(session, volunteer) -> None:
    first, second = _emit_many(session, volunteer.id, 2)

    delete_notification(session, volunteer.id, first.id)

    page = list_notifications(session, volunteer.id)
    assert [item.id for item in page.items] == [second.id]
    assert page.unread_count == 1


def test_delete_missing_or_foreign_notification_raises(session, volunteer, ngo) -> None:
    (foreign,) = _emit_many(session, ngo.id, 1)

    with pytest.raises(NotificationNotFoundError):
        delete_notification(session, volunteer.id, foreign.id)
    with pytest.raises(NotificationNotFoundError):
        delete_notification(session, volunteer.id, 9999)

    assert get_unread_count(session, ngo.id) == 1


def test_delete_read_notifications_keeps_unread(session, volunteer) -> None:
    first, second, third = _emit_many(session, volunteer.id, 3)
    mark_notifications_read(session, volunteer.id, [first.id, third.id])

    assert delete_read_notifications(session, volunteer.id) == 2
    page = list_notifications(session, volunteer.id)
    assert [item.id for item in page.items] == [second.id]


def test_purge_removes_notifications_past_retention(session, volunteer) -> None:
    repository = NotificationRepository(session)
    now = datetime.now(timezone.utc)
    old = repository.create(
        Notification(
            id=None,
            recipient_id=volunteer.id,
            type=NotificationType.POINTS_AWARDED,
            title="Points Awarded",
            message="Old news",
            created_at=now - timedelta(days=31),
        )
    )
    (fresh,) = _emit_many(session, volunteer.id, 1)

    removed = purge_expired_notifications(session, retention_days=30, now=now)

    assert removed == 1
    remaining = [item.id for item in list_notifications(session, volunteer.id).items]
    assert remaining == [fresh.id]
    assert old.id not in remaining


def test_purge_rejects_non_positive_retention(session) -> None:
    with pytest.raises(ValueError):
        purge_expired_notifications(session, retention_days=0)


@pytest.fixture()
def new_york_timezone(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_TIMEZONE", "America/New_York")
    reset_settings_cache()
    yield
    monkeypatch.delenv("APP_TIMEZONE")
    reset_settings_cache()


def _create_at(session, recipient_id: int, title: str, created_at: datetime) -> Notification:
    return NotificationRepository(session).create(
        Notification(
            id=None,
            recipient_id=recipient_id,
            type=NotificationType.BADGE_EARNED,
            title=title,
            message=title,
            created_at=created_at,
        )
    )


def test_ordering_survives_daylight_saving_fallback(
    session, volunteer, new_york_timezone
) -> None:
    # 01:50 EDT and 01:10 EST, both on the repeated local hour.
    older_at = datetime(2025, 11, 2, 5, 50, tzinfo=timezone.utc)
    newer_at = datetime(2025, 11, 2, 6, 10, tzinfo=timezone.utc)
    _create_at(session, volunteer.id, "older", older_at)
    _create_at(session, volunteer.id, "newer", newer_at)

    items = list_notifications(session, volunteer.id).items

    assert [(item.title, item.created_at) for item in items] == [
        ("newer", newer_at),
        ("older", older_at),
    ]


def test_purge_cutoff_ignores_app_timezone(session, volunteer, new_york_timezone) -> None:
    now = datetime(2025, 12, 2, 6, 0, tzinfo=timezone.utc)
    _create_at(session, volunteer.id, "expired", now - timedelta(days=30, minutes=1))
    kept = _create_at(session, volunteer.id, "kept", now - timedelta(days=29, hours=23))

    assert purge_expired_notifications(session, retention_days=30, now=now) == 1
    assert [item.id for item in list_notifications(session, volunteer.id).items] == [kept.id]
