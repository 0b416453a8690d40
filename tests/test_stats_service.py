from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from school_dashboard.core.exceptions import ValidationError
from school_dashboard.stats.service import StatsService


@pytest.fixture
def school(container, student_payload, employee_payload, fixed_now):
    s = container.student_service
    a = s.create(student_payload("S1", section="primary", **{"class": "3"}))
    b = s.create(student_payload("S2", gender="male", firstName="Bilal", section="secondary", **{"class": "9"}))
    container.employee_service.create(employee_payload("E1"))
    container.employee_service.create(employee_payload("E2", role="guard", subjects=[]))
    container.classroom_service.create({"name": "3A", "section": "primary", "capacity": 30})

    today = fixed_now.isoformat()
    old = (fixed_now - timedelta(days=40)).isoformat()
    att = container.attendance_service
    att.create({"studentId": a.id, "status": "present", "date": today})
    att.create({"studentId": b.id, "status": "absent", "date": today})
    att.create({"studentId": b.id, "status": "late", "date": old})
    att.create({"studentId": a.id, "status": "present", "date": old})

    pay = container.payment_service
    pay.create({"studentId": a.id, "amount": 300, "status": "paid", "date": today})
    pay.create({"studentId": b.id, "amount": 200, "status": "partial", "date": today})
    pay.create({"studentId": b.id, "amount": 100, "status": "unpaid", "date": old})

    exam = container.exam_service.create(
        {"name": "Midterm", "section": "primary", "class": "3", "date": today, "subjects": ["Math", "Science"]}
    )
    res = container.result_service
    res.create({"examId": exam.id, "studentId": a.id, "subject": "Math", "score": 90})
    res.create({"examId": exam.id, "studentId": b.id, "subject": "Math", "score": 50})
    res.create({"examId": exam.id, "studentId": a.id, "subject": "Science", "score": 70})
    return container


@pytest.fixture
def stats(school, repos, fixed_now):
    return StatsService(
        students=repos["students_repo"],
        employees=repos["employees_repo"],
        classrooms=repos["classrooms_repo"],
        attendance=repos["attendance_repo"],
        payments=repos["payments_repo"],
        exams=repos["exams_repo"],
        results=repos["results_repo"],
        clock=lambda: fixed_now,
    )


def test_get_stats_counts(stats):
    data = stats.get_stats()

    assert data["students"] == {"total": 2, "male": 1, "female": 1, "primary": 1, "secondary": 1, "highschool": 0}
    assert data["employees"] == {"total": 2, "teachers": 1}
    assert data["classrooms"] == {"total": 1}
    assert data["attendance"] == {"present": 2, "absent": 1, "late": 1}


def test_partial_payments_count_as_outstanding(stats):
    payments = stats.get_stats()["payments"]

    assert payments["paid"] == 1
    assert payments["partial"] == 1
    assert payments["totalPaidAmount"] == 300
    assert payments["totalUnpaidAmount"] == 300


def test_overview_and_academics(stats):
    data = stats.get_stats()

    assert data["overview"] == {"studentTeacherRatio": 2.0, "attendanceRate": 50.0, "paymentCompletionRate": 33.33}
    assert data["academics"]["averageScore"] == 70.0
    assert data["academics"]["subjectPerformance"] == [
        {"subject": "Math", "avgScore": 70.0, "passRate": 50.0},
        {"subject": "Science", "avgScore": 70.0, "passRate": 100.0},
    ]


def test_empty_school_has_no_division_errors(repos):
    svc = StatsService(
        students=repos["students_repo"],
        employees=repos["employees_repo"],
        classrooms=repos["classrooms_repo"],
        attendance=repos["attendance_repo"],
        payments=repos["payments_repo"],
        exams=repos["exams_repo"],
        results=repos["results_repo"],
    )

    overview = svc.get_stats()["overview"]

    assert overview == {"studentTeacherRatio": 0, "attendanceRate": 0, "paymentCompletionRate": 0}


def test_analytics_all_period(stats, fixed_now):
    data = stats.get_analytics("all")

    assert data["demographics"]["sectionDistribution"]["secondary"] == 1
    assert data["attendance"]["bySection"]["primary"] == {"present": 2, "absent": 0}
    assert data["academic"]["averageScores"]["bySection"]["primary"] == 80.0
    assert data["academic"]["subjectPerformance"][0] == {"subject": "Math", "average": 70.0, "highest": 90, "lowest": 50}
    assert data["financial"]["feeCollection"] == {"total": 600, "paid": 300, "unpaid": 100, "partial": 200}
    assert data["financial"]["collectionBySection"] == {"primary": 300, "secondary": 300, "highschool": 0}


def test_analytics_week_excludes_old_rows(stats):
    data = stats.get_analytics("week")

    assert data["attendance"]["overall"] == {"present": 1, "absent": 1, "late": 0}
    assert data["financial"]["feeCollection"]["total"] == 500


def test_attendance_trends_cover_last_seven_days(stats, fixed_now):
    trends = stats.get_analytics()["attendance"]["trends"]

    assert len(trends) == 7
    assert trends[-1] == {"date": fixed_now.date().isoformat(), "present": 1, "absent": 1, "late": 0}
    assert trends[0]["date"] == (fixed_now - timedelta(days=6)).date().isoformat()


def test_monthly_collection_ends_with_current_month(stats):
    months = stats.get_analytics()["financial"]["monthlyCollection"]

    assert len(months) == 6
    assert months[-1] == {"month": "Mar", "year": 2025, "amount": 300}


def test_unknown_period(stats):
    with pytest.raises(ValidationError):
        stats.get_analytics("decade")
