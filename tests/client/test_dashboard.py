from __future__ import annotations

from school_dashboard.client.dashboard import DashboardView, format_currency

from http_fakes import FakeResponse

STATS = {
    "students": {"total": 4, "male": 2, "female": 2, "primary": 3, "secondary": 1, "highschool": 0},
    "employees": {"total": 4, "teachers": 2},
    "classrooms": {"total": 3},
    "attendance": {"present": 5, "absent": 1, "late": 1},
    "payments": {"paid": 2, "unpaid": 1, "partial": 1, "totalPaidAmount": 1500, "totalUnpaidAmount": 750},
    "academics": {"averageScore": 77.67, "totalExams": 1, "totalResults": 3, "subjectPerformance": []},
    "overview": {"studentTeacherRatio": 2.0, "attendanceRate": 71.43, "paymentCompletionRate": 50.0},
}


def test_one_stats_fetch_per_visit(cache, session):
    session.add("GET", "/api/stats", FakeResponse(200, STATS))
    view = DashboardView(cache)

    view.visit()
    cards = view.cards()
    view.cards()

    assert len(session.calls) == 1
    assert cards[0].value == "4"
    assert cards[4].value == "$1,500"
    assert cards[4].detail == "$750 outstanding"
    assert cards[3].value == "71.4%"


def test_failed_stats_render_no_cards(cache, session):
    session.add("GET", "/api/stats", FakeResponse(500, {"message": "Failed to fetch stats"}))
    view = DashboardView(cache)

    assert view.visit().is_error
    assert view.cards() == []


def test_currency_formatting():
    assert format_currency(None) == "$0"
    assert format_currency(1234567) == "$1,234,567"
