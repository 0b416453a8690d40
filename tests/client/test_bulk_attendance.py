from __future__ import annotations

from datetime import datetime, timezone

import pytest

from school_dashboard.client.api_client import ApiError
from school_dashboard.client.bulk_attendance import AttendanceSubmitter, BulkAttendanceSession, RosterView
from school_dashboard.client.notifications import Variant

from http_fakes import FakeResponse

SUBMITTED_AT = datetime(2025, 3, 26, 8, 30)


class FakeSubmitter:
    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.records = []
        self.saved_batches = 0

    def submit(self, record):
        self.records.append(record)
        if record["studentId"] in self.fail_for:
            raise ApiError(500, "500: boom")
        return {"id": len(self.records), **record}

    def batch_saved(self):
        self.saved_batches += 1


@pytest.fixture
def submitter():
    return FakeSubmitter()


def _session(submitter, notifier, **kwargs):
    return BulkAttendanceSession(submitter, notifier=notifier, clock=lambda: SUBMITTED_AT, **kwargs)


def test_empty_batch_makes_no_call(submitter, notifier):
    outcome = _session(submitter, notifier).submit()

    assert outcome.attempted == 0
    assert submitter.records == []
    assert notifier.sent[0].title == "No Records Selected"
    assert notifier.sent[0].variant == Variant.DESTRUCTIVE


def test_two_marked_students_two_posts(submitter, notifier):
    completed = []
    session = _session(submitter, notifier, on_complete=lambda: completed.append(True))
    session.mark(1, "present")
    session.mark(2, "absent", note="sick")

    outcome = session.submit()

    assert outcome.succeeded == 2
    assert submitter.records == [
        {"studentId": 1, "status": "present", "note": "", "date": SUBMITTED_AT.isoformat()},
        {"studentId": 2, "status": "absent", "note": "sick", "date": SUBMITTED_AT.isoformat()},
    ]
    assert notifier.sent[-1].description == "Attendance recorded for 2 students"
    assert session.statuses == {}
    assert completed == [True]
    assert submitter.saved_batches == 1


def test_unmarked_students_are_not_posted(submitter, notifier):
    session = _session(submitter, notifier)
    session.mark(1, "present")
    session.set_note(2, "note without a status")

    session.submit()

    assert [r["studentId"] for r in submitter.records] == [1]


def test_partial_failure_still_clears_state(notifier):
    submitter = FakeSubmitter(fail_for={2})
    session = _session(submitter, notifier)
    for sid, status in ((1, "present"), (2, "late"), (3, "absent")):
        session.mark(sid, status)

    outcome = session.submit()

    assert len(submitter.records) == 3
    assert outcome.succeeded == 2
    assert [sid for sid, _ in outcome.failures] == [2]
    assert notifier.sent[-1].description == "Attendance recorded for 2 students (1 failed)"
    assert session.statuses == {}


def test_all_failed_keeps_marks(notifier):
    submitter = FakeSubmitter(fail_for={1, 2})
    completed = []
    session = _session(submitter, notifier, on_complete=lambda: completed.append(True))
    session.mark(1, "present")
    session.mark(2, "absent")

    outcome = session.submit()

    assert len(submitter.records) == 2
    assert outcome.succeeded == 0
    assert set(session.statuses) == {1, 2}
    assert completed == []
    assert submitter.saved_batches == 0
    assert notifier.sent[-1].variant == Variant.DESTRUCTIVE


def test_invalid_status_rejected(submitter, notifier):
    with pytest.raises(ValueError):
        _session(submitter, notifier).mark(1, "excused")


def test_default_submitter_posts_and_invalidates(api, cache, session, notifier):
    session.add("GET", "/api/attendance", FakeResponse(200, []))
    session.add("POST", "/api/attendance", lambda body: FakeResponse(201, {"id": 1, **body}))
    cache.fetch("/api/attendance")
    bulk = BulkAttendanceSession(AttendanceSubmitter(api, cache), notifier=notifier)
    bulk.mark(5, "late")

    bulk.submit()

    assert [c[0:2] for c in session.calls_to("POST")] == [("POST", "/api/attendance")]
    assert cache.peek("/api/attendance") is None


def test_roster_view_narrows_by_class(cache, session):
    roster = [{"id": 1, "class": "3"}, {"id": 2, "class": "4"}, {"id": 3, "class": "3"}]
    session.add("GET", "/api/students", FakeResponse(200, roster))
    view = RosterView.from_cache(cache)

    assert view.classes() == ["3", "4"]
    assert [s["id"] for s in view.visible("3")] == [1, 3]
    assert len(view.visible()) == 3


class ExplodingSubmitter(FakeSubmitter):
    def submit(self, record):
        self.records.append(record)
        if record["studentId"] in self.fail_for:
            raise RuntimeError("socket closed")
        return {"id": len(self.records), **record}


def test_unexpected_error_does_not_stop_the_batch(notifier):
    submitter = ExplodingSubmitter(fail_for={1})
    session = _session(submitter, notifier)
    session.mark(1, "present")
    session.mark(2, "absent")

    outcome = session.submit()

    assert len(submitter.records) == 2
    assert outcome.succeeded == 1
    assert [sid for sid, _ in outcome.failures] == [1]
    assert notifier.sent[-1].description == "Attendance recorded for 1 students (1 failed)"
    assert session.statuses == {}


def test_all_failed_with_unexpected_errors_reports_message(notifier):
    session = _session(ExplodingSubmitter(fail_for={1}), notifier)
    session.mark(1, "present")

    session.submit()

    assert notifier.sent[-1].description == "Failed to save attendance records: socket closed"
    assert set(session.statuses) == {1}


def test_non_json_reply_counts_as_failure_and_batch_continues(api, session, notifier):
    session.add("POST", "/api/attendance", FakeResponse(200, raw="<html>proxy</html>"))
    bulk = BulkAttendanceSession(AttendanceSubmitter(api), notifier=notifier)
    for sid in (1, 2, 3):
        bulk.mark(sid, "present")

    outcome = bulk.submit()

    assert len(session.calls_to("POST")) == 3
    assert len(outcome.failures) == 3
    assert notifier.sent[-1].variant == Variant.DESTRUCTIVE
    assert notifier.sent[-1].description == "Failed to save attendance records: 200: unexpected response body"


def test_unmark_forgets_the_note(submitter, notifier):
    session = _session(submitter, notifier)
    session.mark(1, "absent", note="sick")
    session.unmark(1)
    session.mark(1, "present")

    session.submit()

    assert submitter.records[0]["note"] == ""


def test_default_timestamp_is_utc(submitter, notifier):
    session = BulkAttendanceSession(submitter, notifier=notifier)
    session.mark(1, "present")

    session.submit()

    sent = datetime.fromisoformat(submitter.records[0]["date"])
    assert sent.utcoffset() == timezone.utc.utcoffset(None)
