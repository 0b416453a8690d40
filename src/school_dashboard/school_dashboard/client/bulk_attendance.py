"""Marking attendance for a whole class in one sitting.

Each marked student becomes its own POST /api/attendance; there is no batch
endpoint, so every record succeeds or fails on its own.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional, Protocol, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import AttendanceStatus
from .api_client import ApiClient, ApiError
from .filters import distinct, filter_by_class
from .notifications import LoggingNotifier, Notifier, Variant
from .query_cache import QueryCache

logger = logging.getLogger(__name__)

ATTENDANCE_KEY = "/api/attendance"


class SubmissionStrategy(Protocol):
    def submit(self, record: dict) -> Any:
        raise NotImplementedError

    def batch_saved(self) -> None:
        raise NotImplementedError


class AttendanceSubmitter:
    def __init__(self, api: ApiClient, cache: Optional[QueryCache] = None):
        self._api = api
        self._cache = cache

    def submit(self, record: dict) -> Any:
        return self._api.post(ATTENDANCE_KEY, record)

    def batch_saved(self) -> None:
        if self._cache is not None:
            self._cache.invalidate(ATTENDANCE_KEY)


@dataclass(frozen=True)
class BatchOutcome:
    succeeded: int = 0
    failures: list = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return self.succeeded + len(self.failures)


class BulkAttendanceSession:
    def __init__(
        self,
        submitter: SubmissionStrategy,
        *,
        notifier: Optional[Notifier] = None,
        on_complete: Optional[Callable[[], None]] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._submitter = submitter
        self._notifier = notifier or LoggingNotifier()
        self._on_complete = on_complete
        self._clock = clock
        self._statuses: dict[int, AttendanceStatus] = {}
        self._notes: dict[int, str] = {}

    @property
    def statuses(self) -> dict:
        return dict(self._statuses)

    @property
    def notes(self) -> dict:
        return dict(self._notes)

    def mark(self, student_id: int, status, note: Optional[str] = None) -> None:
        self._statuses[int(student_id)] = AttendanceStatus(status)
        if note is not None:
            self.set_note(student_id, note)

    def set_note(self, student_id: int, note: str) -> None:
        self._notes[int(student_id)] = note

    def unmark(self, student_id: int) -> None:
        self._statuses.pop(int(student_id), None)
        self._notes.pop(int(student_id), None)

    def clear(self) -> None:
        self._statuses.clear()
        self._notes.clear()

    def submit(self) -> BatchOutcome:
        if not self._statuses:
            self._notifier.notify(
                "No Records Selected",
                "Please mark attendance status for at least one student",
                Variant.DESTRUCTIVE,
            )
            return BatchOutcome()

        submitted_at = self._clock().isoformat()
        records = [
            {
                "studentId": student_id,
                "status": status.value,
                "note": self._notes.get(student_id, ""),
                "date": submitted_at,
            }
            for student_id, status in self._statuses.items()
        ]

        succeeded = 0
        failures = []
        for record in records:
            try:
                self._submitter.submit(record)
                succeeded += 1
            except Exception as e:
                logger.warning("Failed to save attendance for student %s: %s", record["studentId"], e)
                failures.append((record["studentId"], e))

        outcome = BatchOutcome(succeeded=succeeded, failures=failures)
        if succeeded:
            suffix = f" ({len(failures)} failed)" if failures else ""
            self._notifier.notify("Success", f"Attendance recorded for {succeeded} students{suffix}")
            self._submitter.batch_saved()
            self.clear()
            if self._on_complete is not None:
                self._on_complete()
        else:
            logger.error("Every attendance record failed to save (%d)", len(failures))
            self._notifier.notify(
                "Error",
                f"Failed to save attendance records: {_describe(failures[0][1])}",
                Variant.DESTRUCTIVE,
            )
        return outcome


class RosterView:
    """Students offered for marking, optionally narrowed to one class."""

    def __init__(self, source: Callable[[], Sequence[dict]]):
        self._source = source

    @classmethod
    def from_cache(cls, cache: QueryCache, key: str = "/api/students") -> "RosterView":
        def load() -> Sequence[dict]:
            state = cache.fetch(key)
            return state.data if state.is_success and state.data else []

        return cls(load)

    def classes(self) -> list:
        return distinct(self._source(), "class")

    def visible(self, class_name: Optional[str] = None) -> list:
        return filter_by_class(self._source(), class_name)


def _describe(error: Exception) -> str:
    return error.message if isinstance(error, ApiError) else str(error)
