from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .query_cache import QueryCache, QueryState

STATS_KEY = "/api/stats"


def format_currency(amount) -> str:
    return f"${(amount or 0):,.0f}"


def format_percent(value) -> str:
    return f"{(value or 0):.1f}%"


@dataclass(frozen=True)
class StatCard:
    title: str
    value: str
    detail: Optional[str] = None


class DashboardView:
    """Home page: one `/api/stats` fetch per visit, rendered as fixed cards."""

    def __init__(self, cache: QueryCache):
        self._cache = cache

    def visit(self) -> QueryState:
        return self._cache.refetch(STATS_KEY)

    def cards(self) -> list[StatCard]:
        state = self._cache.peek(STATS_KEY)
        if state is None or not state.is_success:
            return []
        stats = state.data
        students = stats["students"]
        employees = stats["employees"]
        payments = stats["payments"]
        overview = stats["overview"]
        return [
            StatCard("Total Students", str(students["total"]), f"{students['male']} male, {students['female']} female"),
            StatCard("Employees", str(employees["total"]), f"{employees['teachers']} teachers"),
            StatCard("Classrooms", str(stats["classrooms"]["total"])),
            StatCard("Attendance Rate", format_percent(overview["attendanceRate"])),
            StatCard(
                "Fees Collected",
                format_currency(payments["totalPaidAmount"]),
                f"{format_currency(payments['totalUnpaidAmount'])} outstanding",
            ),
            StatCard("Average Score", f"{(stats['academics']['averageScore'] or 0):.1f}"),
        ]
