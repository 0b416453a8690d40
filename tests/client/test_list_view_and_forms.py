from __future__ import annotations

from school_dashboard.client.filters import field_equals
from school_dashboard.client.forms import FormSubmitter
from school_dashboard.client.list_view import ResourceListView
from school_dashboard.client.notifications import Variant

from http_fakes import FakeResponse


def _students_backend(session, rows):
    session.add("GET", "/api/students", lambda _: FakeResponse(200, list(rows)))

    def delete(_):
        rows[:] = [r for r in rows if r["id"] != 1]
        return FakeResponse(204)

    session.add("DELETE", "/api/students/1", delete)


def test_delete_requires_confirmation(api, cache, session, notifier):
    rows = [{"id": 1, "firstName": "Amina", "lastName": "Yusuf", "class": "3"}]
    _students_backend(session, rows)
    view = ResourceListView(api, cache, "/api/students", notifier=notifier)

    assert view.delete(1, confirm=lambda: False) is False
    assert session.calls_to("DELETE") == []


def test_deleted_row_disappears_from_next_fetch(api, cache, session, notifier):
    rows = [
        {"id": 1, "firstName": "Amina", "lastName": "Yusuf", "class": "3"},
        {"id": 2, "firstName": "Bilal", "lastName": "Omar", "class": "4"},
    ]
    _students_backend(session, rows)
    view = ResourceListView(api, cache, "/api/students", notifier=notifier)
    assert len(view.visible()) == 2

    assert view.delete(1, confirm=lambda: True) is True

    assert [r["id"] for r in view.visible()] == [2]
    assert len(session.calls_to("GET")) == 2


def test_visible_filters_and_searches(api, cache, session):
    rows = [
        {"id": 1, "firstName": "Amina", "lastName": "Yusuf", "class": "3"},
        {"id": 2, "firstName": "Amir", "lastName": "Omar", "class": "4"},
    ]
    _students_backend(session, rows)
    view = ResourceListView(api, cache, "/api/students")

    assert [r["id"] for r in view.visible(search="ami")] == [1, 2]
    assert [r["id"] for r in view.visible([field_equals("class", "4")], search="ami")] == [2]


def test_failed_load_then_retry(api, cache, session):
    session.add("GET", "/api/payments", FakeResponse(500, {"message": "Failed to fetch payments"}))
    view = ResourceListView(api, cache, "/api/payments")

    assert view.visible() == []
    assert view.error_message == "Failed to load payments"

    session.add("GET", "/api/payments", FakeResponse(200, [{"id": 1}]))
    assert view.retry().is_success
    assert view.error_message is None


def test_invalid_form_sends_nothing(api, cache, session, notifier):
    form = FormSubmitter(api, cache, "/api/students", notifier=notifier)

    assert form.create({"firstName": "Amina"}) is None
    assert session.calls == []
    assert notifier.sent[-1].variant == Variant.DESTRUCTIVE
    assert "studentId" in notifier.sent[-1].description


def test_payment_form_invalidates_stats(api, cache, session, notifier):
    session.add("GET", "/api/stats", FakeResponse(200, {}))
    session.add("GET", "/api/payments", FakeResponse(200, []))
    session.add("POST", "/api/payments", FakeResponse(201, {"id": 1}))
    cache.fetch("/api/stats")
    cache.fetch("/api/payments")

    saved = FormSubmitter(api, cache, "/api/payments", notifier=notifier).create(
        {"studentId": 1, "amount": 100, "status": "paid"}
    )

    assert saved == {"id": 1}
    assert cache.peek("/api/stats") is None
    assert cache.peek("/api/payments") is None


def test_edit_form_uses_patch(api, cache, session, notifier):
    session.add("PATCH", "/api/classrooms/3", FakeResponse(200, {"id": 3, "capacity": 40}))

    FormSubmitter(api, cache, "/api/classrooms", notifier=notifier).update(3, {"capacity": 40})

    assert session.calls == [("PATCH", "/api/classrooms/3", {"capacity": 40})]
