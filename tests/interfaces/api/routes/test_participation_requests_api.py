"""Tests for the participation request endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def event(make_event, ngo):
    return make_event(ngo, title="Beach Cleanup")


def _request_to_join(client: TestClient, headers: dict[str, str], event_id: int, **payload):
    return client.post(
        f"/v1/participation-requests/event/{event_id}", json=payload, headers=headers
    )


def test_full_accept_flow(client: TestClient, auth_headers, event, ngo, volunteer) -> None:
    volunteer_headers = auth_headers(volunteer)
    ngo_headers = auth_headers(ngo)

    created = _request_to_join(client, volunteer_headers, event.id, message="Count me in")
    assert created.status_code == 201
    request = created.json()["data"]
    assert request["status"] == "pending"
    assert request["eventCreatorId"] == ngo.id

    ngo_inbox = client.get("/v1/notifications", headers=ngo_headers).json()
    assert ngo_inbox["data"][0]["type"] == "participation_request"

    pending = client.get("/v1/participation-requests/my-requests", headers=ngo_headers).json()
    assert [item["id"] for item in pending["data"]] == [request["id"]]

    decided = client.put(
        f"/v1/participation-requests/{request['id']}/status",
        json={"status": "accepted"},
        headers=ngo_headers,
    )
    assert decided.status_code == 200
    assert decided.json()["data"]["status"] == "accepted"

    inbox = client.get("/v1/notifications", headers=volunteer_headers).json()
    accepted = [item for item in inbox["data"] if item["type"] == "participation_accepted"]
    assert len(accepted) == 1
    assert accepted[0]["actionUrl"] == f"/events/{event.id}"

    again = client.put(
        f"/v1/participation-requests/{request['id']}/status",
        json={"status": "rejected", "rejectionReason": "Oops"},
        headers=ngo_headers,
    )
    assert again.status_code == 409
    inbox = client.get("/v1/notifications", headers=volunteer_headers).json()
    assert inbox["total"] == 1


def test_reject_with_reason(client: TestClient, auth_headers, event, ngo, volunteer) -> None:
    request_id = _request_to_join(client, auth_headers(volunteer), event.id).json()["data"]["id"]

    response = client.put(
        f"/v1/participation-requests/{request_id}/status",
        json={"status": "rejected", "rejectionReason": "Not enough experience"},
        headers=auth_headers(ngo),
    )

    assert response.status_code == 200
    assert response.json()["data"]["rejectionReason"] == "Not enough experience"
    inbox = client.get("/v1/notifications", headers=auth_headers(volunteer)).json()
    assert "Not enough experience" in inbox["data"][0]["message"]


def test_decision_payload_is_validated(client: TestClient, auth_headers, event, ngo, volunteer):
    request_id = _request_to_join(client, auth_headers(volunteer), event.id).json()["data"]["id"]
    headers = auth_headers(ngo)
    url = f"/v1/participation-requests/{request_id}/status"

    assert client.put(url, json={"status": "maybe"}, headers=headers).status_code == 422
    too_long = {"status": "rejected", "rejectionReason": "x" * 501}
    assert client.put(url, json=too_long, headers=headers).status_code == 422


def test_error_mapping(client: TestClient, auth_headers, event, make_user, volunteer) -> None:
    volunteer_headers = auth_headers(volunteer)
    request_id = _request_to_join(client, volunteer_headers, event.id).json()["data"]["id"]
    outsider_headers = auth_headers(make_user("Mallory"))

    assert _request_to_join(client, volunteer_headers, 999).status_code == 404
    assert _request_to_join(client, volunteer_headers, event.id).status_code == 400
    forbidden = client.put(
        f"/v1/participation-requests/{request_id}/status",
        json={"status": "accepted"},
        headers=outsider_headers,
    )
    assert forbidden.status_code == 403
    assert (
        client.get(
            f"/v1/participation-requests/event/{event.id}/requests", headers=outsider_headers
        ).status_code
        == 403
    )


def test_cancel_user_requests_and_stats(
    client: TestClient, auth_headers, event, ngo, volunteer
) -> None:
    volunteer_headers = auth_headers(volunteer)
    request_id = _request_to_join(client, volunteer_headers, event.id).json()["data"]["id"]

    mine = client.get("/v1/participation-requests/user-requests", headers=volunteer_headers)
    assert [item["id"] for item in mine.json()["data"]] == [request_id]

    stats = client.get("/v1/participation-requests/stats", headers=auth_headers(ngo)).json()
    assert stats["data"] == {"pending": 1, "accepted": 0, "rejected": 0, "total": 1}

    cancelled = client.delete(
        f"/v1/participation-requests/{request_id}", headers=volunteer_headers
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["success"] is True

    stats = client.get("/v1/participation-requests/stats", headers=auth_headers(ngo)).json()
    assert stats["data"]["total"] == 0
