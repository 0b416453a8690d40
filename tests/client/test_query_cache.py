from __future__ import annotations

from school_dashboard.client.query_cache import QueryCache

from http_fakes import FakeResponse


def test_fetch_is_cached(cache, session):
    session.add("GET", "/api/students", FakeResponse(200, []))

    first = cache.fetch("/api/students")
    second = cache.fetch("/api/students")

    assert first.is_success and second is first
    assert len(session.calls) == 1


def test_error_state_is_stored_not_retried(cache, session):
    session.add("GET", "/api/students", FakeResponse(500, {"message": "Failed to fetch students"}))

    state = cache.fetch("/api/students")
    cache.fetch("/api/students")

    assert state.is_error
    assert state.error.status == 500
    assert len(session.calls) == 1


def test_invalidate_drops_key_and_children_only(cache, session):
    for path in ("/api/students", "/api/students/1", "/api/studentsx", "/api/stats"):
        session.add("GET", path, FakeResponse(200, {}))
        cache.fetch(path)

    cache.invalidate("/api/students")

    assert cache.peek("/api/students") is None
    assert cache.peek("/api/students/1") is None
    assert cache.peek("/api/studentsx") is not None
    assert cache.peek("/api/stats") is not None


def test_refetch_always_hits_the_network(cache, session):
    session.add("GET", "/api/stats", FakeResponse(200, {"students": {}}))
    cache.fetch("/api/stats")

    cache.refetch("/api/stats")

    assert len(session.calls) == 2


def test_non_json_reply_becomes_error_state(cache, session):
    session.add("GET", "/api/students", FakeResponse(200, raw="<html>login</html>"))

    state = cache.fetch("/api/students")

    assert state.is_error
    assert cache.peek("/api/students") is state


def test_unexpected_fetcher_failure_is_stored_as_error():
    def fetcher(key):
        raise RuntimeError("disk full")

    cache = QueryCache(fetcher)

    state = cache.fetch("/api/stats")

    assert state.is_error
    assert state.error.status is None
    assert state.error.message == "disk full"
