from __future__ import annotations


def _create_student(client, student_payload, code="S001", **overrides):
    resp = client.post("/api/students", json=student_payload(code, **overrides))
    assert resp.status_code == 201
    return resp.get_json()


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_student_crud_round_trip(client, student_payload):
    created = _create_student(client, student_payload)
    assert created["studentId"] == "S001"
    assert created["class"] == "3"

    resp = client.patch(f"/api/students/{created['id']}", json={"class": "4"})
    assert resp.status_code == 200
    assert resp.get_json()["class"] == "4"

    assert client.delete(f"/api/students/{created['id']}").status_code == 204
    assert client.get("/api/students").get_json() == []


def test_invalid_payload_returns_400_with_errors(client):
    resp = client.post("/api/students", json={"firstName": "A"})

    body = resp.get_json()
    assert resp.status_code == 400
    assert body["message"] == "Invalid student data"
    assert {"field": "studentId", "message": "studentId is required"} in body["errors"]


def test_non_numeric_id_returns_400(client):
    resp = client.get("/api/students/abc")

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Invalid student ID"}


def test_unknown_id_returns_404(client):
    resp = client.get("/api/classrooms/9")

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Classroom not found"}


def test_attendance_has_no_delete_route(client):
    assert client.delete("/api/attendance/1").status_code == 405


def test_attendance_by_student(client, student_payload):
    student = _create_student(client, student_payload)
    for status in ("present", "late"):
        resp = client.post("/api/attendance", json={"studentId": student["id"], "status": status})
        assert resp.status_code == 201

    rows = client.get(f"/api/attendance/student/{student['id']}").get_json()

    assert sorted(r["status"] for r in rows) == ["late", "present"]


def test_result_grade_on_the_wire(client, student_payload):
    student = _create_student(client, student_payload)
    exam = client.post(
        "/api/exams", json={"name": "Final", "section": "primary", "class": "3", "date": "2025-06-01"}
    ).get_json()

    resp = client.post(
        "/api/results", json={"examId": exam["id"], "studentId": student["id"], "subject": "Math", "score": 72}
    )

    assert resp.status_code == 201
    assert resp.get_json()["grade"] == "C"
    assert len(client.get(f"/api/results/exam/{exam['id']}").get_json()) == 1


def test_unexpected_error_returns_500(client, container, monkeypatch):
    def boom():
        raise RuntimeError("db down")

    monkeypatch.setattr(container.students_repo, "list_all", boom)

    resp = client.get("/api/students")

    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Failed to fetch students"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert "message" in resp.get_json()


def test_stats_endpoint(client, student_payload):
    _create_student(client, student_payload)

    stats = client.get("/api/stats").get_json()

    assert stats["students"]["total"] == 1
    assert stats["students"]["female"] == 1


def test_analytics_rejects_unknown_period(client):
    assert client.get("/api/analytics?period=decade").status_code == 400


def test_csv_report_download(client, student_payload):
    _create_student(client, student_payload)

    resp = client.get("/api/reports/students.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "students-report.csv" in resp.headers["Content-Disposition"]
    assert "Amina Yusuf" in resp.data.decode("utf-8-sig")


def test_unknown_report_kind(client):
    assert client.get("/api/reports/salaries.csv").status_code == 400
