"""Aggregate statistics for the dashboard home page and the analytics screen.

Everything is computed from the stored rows on each call; the data set of a
single school is small enough that no caching or SQL aggregation is needed.
"""
from __future__ import annotations

import logging
from collections import Counter, OrderedDict, defaultdict
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import ANALYTICS_PERIOD_DAYS, TREND_DAYS
from ..core.enums import AttendanceStatus, EmployeeRole, Gender, PaymentStatus, Section
from ..core.exceptions import ValidationError
from ..results.grading import is_pass

logger = logging.getLogger(__name__)

MONTHLY_COLLECTION_MONTHS = 6


def _ratio(part: float, whole: float, *, scale: float = 1.0) -> float:
    if not whole:
        return 0
    return round(part / whole * scale, 2)


def _mean(values: Sequence[float]) -> float:
    return round(sum(values) / len(values), 2) if values else 0


def _section_counts(items: Iterable, key: Callable) -> dict:
    counts = {s.value: 0 for s in Section}
    for item in items:
        section = key(item)
        if section is not None:
            counts[section.value] += 1
    return counts


class StatsService:
    def __init__(
        self,
        *,
        students,
        employees,
        classrooms,
        attendance,
        payments,
        exams,
        results,
        clock: Callable[[], datetime] = now_local,
    ):
        self._students = students
        self._employees = employees
        self._classrooms = classrooms
        self._attendance = attendance
        self._payments = payments
        self._exams = exams
        self._results = results
        self._clock = clock

    # ---- /api/stats ----
    def get_stats(self) -> dict:
        students = self._students.list_all()
        employees = self._employees.list_all()
        attendance = self._attendance.list_all()
        payments = self._payments.list_all()
        results = self._results.list_all()

        gender = Counter(s.gender for s in students)
        teachers = sum(1 for e in employees if e.role == EmployeeRole.TEACHER)
        marks = Counter(a.status for a in attendance)

        paid_amount = unpaid_amount = 0
        by_status = Counter()
        for p in payments:
            by_status[p.status] += 1
            if p.status == PaymentStatus.PAID:
                paid_amount += p.amount
            else:
                # partial payments carry no paid-so-far figure; the whole amount is outstanding
                unpaid_amount += p.amount

        return {
            "students": {
                "total": len(students),
                "male": gender[Gender.MALE],
                "female": gender[Gender.FEMALE],
                **_section_counts(students, lambda s: s.section),
            },
            "employees": {"total": len(employees), "teachers": teachers},
            "classrooms": {"total": len(self._classrooms.list_all())},
            "attendance": {s.value: marks[s] for s in AttendanceStatus},
            "payments": {
                "paid": by_status[PaymentStatus.PAID],
                "unpaid": by_status[PaymentStatus.UNPAID],
                "partial": by_status[PaymentStatus.PARTIAL],
                "totalPaidAmount": paid_amount,
                "totalUnpaidAmount": unpaid_amount,
            },
            "academics": {
                "averageScore": _mean([r.score for r in results]),
                "totalExams": len(self._exams.list_all()),
                "totalResults": len(results),
                "subjectPerformance": self._subject_pass_rates(results),
            },
            "overview": {
                "studentTeacherRatio": _ratio(len(students), teachers),
                "attendanceRate": _ratio(marks[AttendanceStatus.PRESENT], len(attendance), scale=100),
                "paymentCompletionRate": _ratio(by_status[PaymentStatus.PAID], len(payments), scale=100),
            },
        }

    @staticmethod
    def _subject_pass_rates(results) -> list[dict]:
        grouped = defaultdict(list)
        for r in results:
            grouped[r.subject].append(r)
        return [
            {
                "subject": subject,
                "avgScore": _mean([r.score for r in rows]),
                "passRate": _ratio(sum(1 for r in rows if is_pass(r.score, r.total)), len(rows), scale=100),
            }
            for subject, rows in sorted(grouped.items())
        ]

    # ---- /api/analytics ----
    def get_analytics(self, period: str = "all") -> dict:
        if period not in ANALYTICS_PERIOD_DAYS:
            allowed = ", ".join(ANALYTICS_PERIOD_DAYS)
            raise ValidationError(f"period must be one of: {allowed}")

        now = self._clock()
        since = self._period_start(period, now)

        students = self._students.list_all()
        section_of = {s.id: s.section for s in students}
        exam_dates = {e.id: e.date for e in self._exams.list_all()}

        attendance = [a for a in self._attendance.list_all() if since is None or a.date >= since]
        payments = [p for p in self._payments.list_all() if since is None or p.date >= since]
        results = [
            r
            for r in self._results.list_all()
            if since is None or (exam_dates.get(r.exam_id) is not None and exam_dates[r.exam_id] >= since)
        ]
        logger.debug(
            "Analytics period=%s: %d attendance, %d payments, %d results",
            period,
            len(attendance),
            len(payments),
            len(results),
        )

        return {
            "period": period,
            "demographics": {
                "genderDistribution": {g.value: sum(1 for s in students if s.gender == g) for g in Gender},
                "sectionDistribution": _section_counts(students, lambda s: s.section),
            },
            "attendance": {
                "overall": {st.value: sum(1 for a in attendance if a.status == st) for st in AttendanceStatus},
                "bySection": self._attendance_by_section(attendance, section_of),
                "trends": self._attendance_trends(attendance, now),
            },
            "academic": {
                "averageScores": {
                    "overall": _mean([r.score for r in results]),
                    "bySection": {
                        s.value: _mean([r.score for r in results if section_of.get(r.student_id) == s])
                        for s in Section
                    },
                },
                "subjectPerformance": self._subject_spread(results),
                "performanceTrends": self._exam_trends(results),
            },
            "financial": {
                "feeCollection": {
                    "total": sum(p.amount for p in payments),
                    **{st.value: sum(p.amount for p in payments if p.status == st) for st in PaymentStatus},
                },
                "collectionBySection": {
                    s.value: sum(p.amount for p in payments if section_of.get(p.student_id) == s) for s in Section
                },
                "monthlyCollection": self._monthly_collection(payments, now),
            },
        }

    @staticmethod
    def _period_start(period: str, now: datetime) -> Optional[datetime]:
        days = ANALYTICS_PERIOD_DAYS[period]
        if days is None:
            return None
        start = now - timedelta(days=days)
        return start.replace(hour=0, minute=0, second=0, microsecond=0)

    @staticmethod
    def _attendance_by_section(attendance, section_of: dict) -> dict:
        out = {s.value: {"present": 0, "absent": 0} for s in Section}
        for a in attendance:
            section = section_of.get(a.student_id)
            if section is None or a.status == AttendanceStatus.LATE:
                continue
            out[section.value][a.status.value] += 1
        return out

    @staticmethod
    def _attendance_trends(attendance, now: datetime) -> list[dict]:
        days = OrderedDict()
        for offset in range(TREND_DAYS - 1, -1, -1):
            day = (now - timedelta(days=offset)).date()
            days[day] = {"date": day.isoformat(), **{st.value: 0 for st in AttendanceStatus}}
        for a in attendance:
            bucket = days.get(a.date.date())
            if bucket is not None:
                bucket[a.status.value] += 1
        return list(days.values())

    @staticmethod
    def _subject_spread(results) -> list[dict]:
        scores = defaultdict(list)
        for r in results:
            scores[r.subject].append(r.score)
        return [
            {"subject": subject, "average": _mean(values), "highest": max(values), "lowest": min(values)}
            for subject, values in sorted(scores.items())
        ]

    def _exam_trends(self, results) -> list[dict]:
        by_exam = defaultdict(list)
        for r in results:
            by_exam[r.exam_id].append(r.score)
        exams = sorted((e for e in self._exams.list_all() if e.id in by_exam), key=lambda e: (e.date, e.id))
        return [{"exam": e.name, "date": e.date.date().isoformat(), "averageScore": _mean(by_exam[e.id])} for e in exams]

    @staticmethod
    def _monthly_collection(payments, now: datetime) -> list[dict]:
        """Paid amounts per calendar month, oldest first, ending with the current month."""
        months = OrderedDict()
        year, month = now.year, now.month
        for _ in range(MONTHLY_COLLECTION_MONTHS):
            months[(year, month)] = 0
            year, month = (year, month - 1) if month > 1 else (year - 1, 12)
        for p in payments:
            key = (p.date.year, p.date.month)
            if key in months and p.status == PaymentStatus.PAID:
                months[key] += p.amount
        return [
            {"month": datetime(y, m, 1).strftime("%b"), "year": y, "amount": amount}
            for (y, m), amount in reversed(months.items())
        ]
