"""Tests for the notification inbox endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from impact_api.application.use_cases.notifications import (
    emit,
    notify_volunteer_participation_accepted,
)
from impact_api.domain.entities import NotificationType


@pytest.fixture()
def inbox(session, volunteer):
    """Three unread notifications for the volunteer, oldest first."""

    return [
        emit(
            session,
            recipient_id=volunteer.id,
            type=NotificationType.BADGE_EARNED,
            title=f"Badge {index}",
            message=f"You earned badge {index}",
            action_url="/badges" if index else None,
        )
        for index in range(3)
    ]


def test_list_returns_camel_case_envelope(client: TestClient, auth_headers, volunteer, inbox):
    response = client.get("/v1/notifications", headers=auth_headers(volunteer))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["unreadCount"] == 3
    assert body["total"] == 3
    assert [item["id"] for item in body["data"]] == [n.id for n in reversed(inbox)]
    first = body["data"][0]
    assert set(first) >= {"id", "type", "title", "message", "read", "createdAt", "actionUrl"}
    assert first["type"] == "badge_earned"
    assert first["read"] is False
    assert first["actionUrl"] == "/badges"


def test_list_supports_limit_skip_and_unread_only(
    client: TestClient, auth_headers, volunteer, inbox
):
    headers = auth_headers(volunteer)
    client.put(
        "/v1/notifications/mark-read", json={"notificationIds": [inbox[2].id]}, headers=headers
    )

    limited = client.get("/v1/notifications?limit=1&skip=1", headers=headers).json()
    assert [item["id"] for item in limited["data"]] == [inbox[1].id]

    unread = client.get("/v1/notifications?unreadOnly=true", headers=headers).json()
    assert [item["id"] for item in unread["data"]] == [inbox[1].id, inbox[0].id]
    assert unread["total"] == 2
    assert unread["unreadCount"] == 2


def test_sender_is_serialized(client: TestClient, auth_headers, session, make_event, ngo, volunteer):
    event = make_event(ngo)
    notify_volunteer_participation_accepted(
        session, volunteer_id=volunteer.id, event=event, request_id=1, decided_by=ngo
    )

    (item,) = client.get("/v1/notifications", headers=auth_headers(volunteer)).json()["data"]

    assert item["sender"] == {"id": ngo.id, "name": "Green Earth", "profilePicture": None}
    assert item["actionUrl"] == f"/events/{event.id}"
    assert item["metadata"] == {"event_id": event.id, "request_id": 1}


def test_unread_count_and_idempotent_mark_read(client: TestClient, auth_headers, volunteer, inbox):
    headers = auth_headers(volunteer)
    payload = {"notificationIds": [inbox[0].id, inbox[0].id]}

    first = client.put("/v1/notifications/mark-read", json=payload, headers=headers)
    second = client.put("/v1/notifications/mark-read", json=payload, headers=headers)

    assert first.status_code == second.status_code == 200
    assert first.json()["success"] is True
    assert client.get("/v1/notifications/unread-count", headers=headers).json() == {
        "success": True,
        "count": 2,
    }


def test_mark_read_requires_id_list(client: TestClient, auth_headers, volunteer):
    response = client.put(
        "/v1/notifications/mark-read",
        json={"notificationIds": "nope"},
        headers=auth_headers(volunteer),
    )

    assert response.status_code == 422


def test_mark_all_read(client: TestClient, auth_headers, volunteer, inbox):
    headers = auth_headers(volunteer)

    response = client.put("/v1/notifications/mark-all-read", headers=headers)

    assert response.status_code == 200
    body = client.get("/v1/notifications", headers=headers).json()
    assert body["unreadCount"] == 0
    assert all(item["read"] for item in body["data"])


def test_delete_notification(client: TestClient, auth_headers, volunteer, inbox):
    headers = auth_headers(volunteer)

    response = client.delete(f"/v1/notifications/{inbox[1].id}", headers=headers)

    assert response.status_code == 200
    body = client.get("/v1/notifications", headers=headers).json()
    assert inbox[1].id not in [item["id"] for item in body["data"]]
    assert body["unreadCount"] == 2


def test_delete_foreign_or_missing_notification_returns_404(
    client: TestClient, auth_headers, ngo, inbox
):
    headers = auth_headers(ngo)

    assert client.delete(f"/v1/notifications/{inbox[0].id}", headers=headers).status_code == 404
    assert client.delete("/v1/notifications/9999", headers=headers).status_code == 404


def test_delete_all_read(client: TestClient, auth_headers, volunteer, inbox):
    headers = auth_headers(volunteer)
    client.put(
        "/v1/notifications/mark-read",
        json={"notificationIds": [inbox[0].id, inbox[1].id]},
        headers=headers,
    )

    response = client.delete("/v1/notifications/read/all", headers=headers)

    assert response.status_code == 200
    body = client.get("/v1/notifications", headers=headers).json()
    assert [item["id"] for item in body["data"]] == [inbox[2].id]
