"""Integration tests for the notification and record endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.utils import campus_now


@pytest.fixture()
def client(database):
    """Return a test client bound to a clean application instance."""

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _register_student(client: TestClient, uid: str = "u1", **overrides) -> None:
    payload = {
        "role": "student",
        "is_approved": True,
        "display_name": "Asha",
        "email": "asha@example.com",
        "branch": "CS",
        "semester": "3",
    }
    payload.update(overrides)
    response = client.put(f"/campus-users/{uid}", json=payload)
    assert response.status_code == 200


def _iso(moment: datetime) -> str:
    return moment.isoformat()


def test_session_check_flow(client: TestClient) -> None:
    """Register records, run the check twice and manage the inbox."""

    _register_student(client)
    now = campus_now()

    response = client.post(
        "/assignments/",
        json={
            "id": "a1",
            "branch": "CS",
            "semester": "3",
            "title": "Graph algorithms",
            "due_date": _iso(now + timedelta(days=2, hours=1)),
        },
    )
    assert response.status_code == 201

    response = client.post(
        "/fees/",
        json={
            "id": "f1",
            "student_uid": "u1",
            "description": "Tuition",
            "amount": 5000,
            "due_date": _iso(now - timedelta(days=1)),
        },
    )
    assert response.status_code == 201

    response = client.post(
        "/attendance/",
        json={
            "day": "2025-03-03",
            "period": 1,
            "subject": "Maths",
            "marks": [{"student_uid": "u1", "status": "absent"}],
        },
    )
    assert response.status_code == 201
    assert response.json()[0]["id"] == "u1-2025-03-03-1"

    first = client.post("/notifications/u1/check")
    assert first.status_code == 200
    assert [item["type"] for item in first.json()] == [
        "approval",
        "assignment_deadline",
        "fee_due",
        "low_attendance",
    ]
    assert first.json()[1]["message"] == "This assignment is due in 3 day(s)."

    second = client.post("/notifications/u1/check")
    assert second.status_code == 200
    assert second.json() == []

    count = client.get("/notifications/u1/unread-count")
    assert count.json() == {"unread_count": 4}

    read = client.post("/notifications/u1/read", json={"ids": ["u1-approval-approved"] * 2})
    assert read.json() == {"affected": 1}

    unread = client.get("/notifications/u1", params={"unread_only": True})
    assert len(unread.json()) == 3

    cleared = client.delete("/notifications/u1")
    assert cleared.json() == {"affected": 4}
    assert client.get("/notifications/u1").json() == []


def test_check_for_unknown_user_returns_404(client: TestClient) -> None:
    response = client.post("/notifications/ghost/check")

    assert response.status_code == 404


def test_preferences_endpoint_disables_fee_notifications(client: TestClient) -> None:
    _register_student(client)
    client.post(
        "/fees/",
        json={
            "student_uid": "u1",
            "description": "Hostel",
            "amount": 1200.5,
            "due_date": _iso(campus_now() - timedelta(days=3)),
        },
    )

    response = client.put("/campus-users/u1/notification-preferences", json={"fee_due": False})
    assert response.status_code == 200
    assert response.json()["notification_preferences"] == {
        "approval": True,
        "assignment_deadline": True,
        "fee_due": False,
        "low_attendance": True,
    }

    generated = client.post("/notifications/u1/check").json()
    assert [item["type"] for item in generated] == ["approval"]


def test_invalid_records_are_rejected(client: TestClient) -> None:
    _register_student(client)

    assert client.put("/campus-users/x", json={"role": "wizard"}).status_code == 400
    assert (
        client.post(
            "/fees/",
            json={
                "student_uid": "u1",
                "description": "Tuition",
                "amount": 10,
                "due_date": _iso(campus_now()),
                "status": "forgiven",
            },
        ).status_code
        == 400
    )
    assert client.patch("/fees/missing/status", json={"status": "paid"}).status_code == 404
    assert client.get("/campus-users/nobody").status_code == 404


def test_websocket_sends_pending_notifications_and_handles_ack(client: TestClient) -> None:
    _register_student(client)
    client.post("/notifications/u1/check")

    with client.websocket_connect("/notifications/ws?uid=u1") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert [item["id"] for item in init["data"]] == ["u1-approval-approved"]

        websocket.send_json({"type": "ack", "ids": ["u1-approval-approved"]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    assert client.get("/notifications/u1/unread-count").json() == {"unread_count": 0}


def test_open_websocket_receives_update_after_session_check(client: TestClient) -> None:
    _register_student(client)

    with client.websocket_connect("/notifications/ws?uid=u1") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        generated = client.post("/notifications/u1/check")
        assert generated.status_code == 200

        update = websocket.receive_json()
        assert update["type"] == "notifications.updated"
        assert update["data"]["unread_count"] == 1
        assert [item["id"] for item in update["data"]["notifications"]] == [
            "u1-approval-approved"
        ]


def test_read_all_marks_every_unread_notification(client: TestClient) -> None:
    _register_student(client)
    client.post(
        "/fees/",
        json={
            "id": "f1",
            "student_uid": "u1",
            "description": "Tuition",
            "amount": 5000,
            "due_date": _iso(campus_now() - timedelta(days=1)),
        },
    )
    client.post("/notifications/u1/check")
    client.post("/notifications/u1/read", json={"ids": ["u1-approval-approved"]})

    response = client.post("/notifications/u1/read-all")

    assert response.status_code == 200
    assert response.json() == {"affected": 1}
    assert client.get("/notifications/u1/unread-count").json() == {"unread_count": 0}
    assert client.post("/notifications/u1/read-all").json() == {"affected": 0}
