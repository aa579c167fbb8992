"""Tests for the notification presentation helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from impact_api.client import NOTIFICATION_STYLES, badge_label, format_relative_time, style_for
from impact_api.domain.entities import NotificationType


def test_every_notification_type_has_a_style() -> None:
    assert set(NOTIFICATION_STYLES) == set(NotificationType)


def test_style_lookup_groups_related_types() -> None:
    assert style_for("participation_rejected") == style_for(NotificationType.EVENT_REJECTED)
    assert style_for(NotificationType.PARTICIPATION_ACCEPTED).icon == "check-circle"


def test_style_lookup_rejects_unknown_types() -> None:
    with pytest.raises(ValueError):
        style_for("friend_request")


@pytest.mark.parametrize(
    ("count", "label"),
    [(0, None), (-1, None), (1, "1"), (9, "9"), (10, "9+"), (250, "9+")],
)
def test_badge_label(count: int, label: str | None) -> None:
    assert badge_label(count) == label


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=20), "less than a minute ago"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(days=2), "2 days ago"),
    ],
)
def test_format_relative_time(delta: timedelta, expected: str) -> None:
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    assert format_relative_time(now - delta, now=now) == expected


def test_format_relative_time_falls_back_to_date() -> None:
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    assert format_relative_time(datetime(2024, 1, 15, 8, 0), now=now) == "Jan 15, 2024"
