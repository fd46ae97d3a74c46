from __future__ import annotations

import pytest

from src.attendance_report.attendance_report.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def _attendance(entry_id, status="attended", person=True):
    data = {"id": entry_id, "status": status, "attendanceDate": "2024-03-07"}
    data["student"] = {"id": entry_id}
    if person:
        data["student"]["person"] = {"firstName": f"Student{entry_id}", "secondName": "Test"}
    return data


def test_pdf_export_returns_attachment_with_summary_headers(client):
    body = {"label": "CS 101 - Lab", "attendances": [_attendance(1), _attendance(2, "absent")]}

    resp = client.post("/reports/attendance/pdf", json=body)

    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data.startswith(b"%PDF")
    assert "attendance-report-cs_101___lab-" in resp.headers["Content-Disposition"]
    assert resp.headers["X-Attendance-Total"] == "2"
    assert resp.headers["X-Attendance-Present"] == "1"
    assert resp.headers["X-Attendance-Rate"] == "50.0%"
    assert resp.headers["X-Report-Pages"] == "1"


def test_pdf_export_rejects_empty_attendances(client):
    resp = client.post("/reports/attendance/pdf", json={"label": "CS 101", "attendances": []})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_pdf_export_rejects_malformed_entry(client):
    body = {"label": "CS 101", "attendances": [_attendance(1), _attendance(5, person=False)]}

    resp = client.post("/reports/attendance/pdf", json=body)

    assert resp.status_code == 422
    assert "5" in resp.get_json()["message"]


def test_pdf_export_rejects_non_json_body(client):
    resp = client.post("/reports/attendance/pdf", data="label=CS", content_type="text/plain")

    assert resp.status_code == 400


def test_summary_endpoint_returns_stats_and_rows(client):
    body = {"attendances": [_attendance(1), _attendance(2), _attendance(3, "excused")]}

    resp = client.post("/reports/attendance/summary", json=body)

    payload = resp.get_json()
    assert resp.status_code == 200
    assert payload["summary"] == {"total": 3, "present": 2, "absent": 1, "rate": 66.7}
    assert [r["studentName"] for r in payload["rows"]] == ["Student1 Test", "Student2 Test", "Student3 Test"]
    assert payload["rows"][2]["status"] == "excused"
