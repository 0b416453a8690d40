from __future__ import annotations

import pytest
import requests

from school_dashboard.client.api_client import ApiClient
from school_dashboard.client.query_cache import QueryCache

from http_fakes import FakeSession, RecordingNotifier


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    return ApiClient("http://testserver", session=session)


@pytest.fixture
def cache(api):
    return QueryCache(api.get)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
