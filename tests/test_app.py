from __future__ import annotations

import io

import pytest

from school_dashboard.main import create_app


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="school_dashboard.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, role: str, name: str | None = None):
    payload = {"email": "demo@school.gov.in", "password": "anything", "role": role}
    if name:
        payload["name"] = name
    return client.post("/login", json=payload)


def test_routes_require_login(client):
    assert client.get("/dashboard").status_code == 401
    assert client.get("/me").get_json()["user"] is None


def test_session_is_restored_from_cookie(client):
    assert login(client, "ADMIN").status_code == 200

    me = client.get("/me").get_json()
    assert me["user"]["role"] == "ADMIN"
    assert me["user"]["name"] == "Headmaster"

    client.post("/logout")
    assert client.get("/me").get_json()["user"] is None


def test_unknown_role_is_rejected(client):
    assert login(client, "JANITOR").status_code == 403


def test_teacher_submits_attendance_and_alerts_are_logged(client, container):
    login(client, "TEACHER")

    roster = client.get("/attendance?class_name=9&section=B").get_json()
    assert roster["already_marked"] is False
    assert [r["status"] for r in roster["roster"]] == ["Present"]

    resp = client.post("/attendance", json={"class_name": "9", "section": "B", "statuses": {"s3": "Absent"}})
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["message"] == "Attendance saved & 1 Auto-Alerts sent!"
    assert [n["type"] for n in body["notifications"]] == ["SMS", "Voice Note"]
    assert len(container.store.communication_logs) == 2

    again = client.post("/attendance", json={"class_name": "9", "section": "B", "statuses": {"s3": "Present"}})
    assert again.status_code == 400


def test_messages_follow_selected_language(client):
    login(client, "TEACHER")
    assert client.post("/language/toggle").get_json()["language"] == "ta"

    resp = client.post("/attendance", json={"class_name": "9", "section": "B", "statuses": {"s3": "Present"}})

    assert resp.get_json()["message"] == "வருகை பதிவு சேமிக்கப்பட்டது"


def test_students_cannot_mark_attendance(client):
    login(client, "STUDENT")

    resp = client.post("/attendance", json={"class_name": "10", "section": "A", "statuses": {"s1": "Present"}})

    assert resp.status_code == 403


def test_leave_flow_student_to_teacher(client):
    login(client, "STUDENT")
    created = client.post("/leaves", json={"from_date": "2026-02-10", "reason": "Fever", "status": "Approved"})
    assert created.status_code == 201
    leave = created.get_json()["leave"]
    assert leave["status"] == "Pending"

    client.post("/logout")
    login(client, "ADMIN")
    admin_view = client.get("/leaves/incoming?status=All").get_json()["leaves"]
    assert leave["id"] not in [l["id"] for l in admin_view]
    assert client.post(f"/leaves/{leave['id']}/approve").status_code == 403

    client.post("/logout")
    login(client, "TEACHER")
    incoming = client.get("/leaves/incoming?class_name=10&section=A").get_json()["leaves"]
    assert leave["id"] in [l["id"] for l in incoming]
    approved = client.post(f"/leaves/{leave['id']}/approve").get_json()
    assert approved["leave"]["status"] == "Approved"


def test_marks_entry_reports_rejections(client, container):
    login(client, "TEACHER")

    resp = client.post("/exams/e1/marks", json={"marks": {"s1": "70", "s2": "150"}})
    body = resp.get_json()

    assert resp.status_code == 200
    assert [m["student_id"] for m in body["saved"]] == ["s1"]
    assert list(body["rejected"]) == ["s2"]


def test_document_upload_stays_in_memory(client, container):
    login(client, "ADMIN")

    resp = client.post(
        "/documents",
        data={"file": (io.BytesIO(b"hello"), "circular.pdf"), "category": "Circular"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 201
    doc = resp.get_json()["document"]
    assert doc["type"] == "pdf"
    assert "content" not in doc
    assert container.store.documents[0].content == b"hello"


def test_notice_and_timetable_endpoints(client):
    login(client, "ADMIN")

    posted = client.post("/notices", json={"title": "Exam", "message": "Starts Monday", "type": "urgent"})
    notice_id = posted.get_json()["notice"]["id"]
    assert client.get("/notices").get_json()["notices"][0]["id"] == notice_id
    assert client.delete(f"/notices/{notice_id}").status_code == 200

    saved = client.put(
        "/timetables",
        json={"class_name": "10", "section": "A", "schedule": [{"day": "Monday", "periods": ["PET"] * 8}]},
    )
    assert saved.status_code == 200
    loaded = client.get("/timetables?class_name=10&section=A").get_json()["timetable"]
    assert loaded["id"] == "tt1"
    assert loaded["schedule"][0]["periods"][0] == "PET"


def test_dashboard_payload(client):
    login(client, "ADMIN")

    data = client.get("/dashboard").get_json()

    assert data["totals"]["students"] == 3
    assert data["exam_results"]["pass"] == 4
