"""Thin JSON client for the dashboard REST API."""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx answer or transport failure.

    `status` is None when no HTTP response was received at all.
    """

    def __init__(self, status: Optional[int], message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class ApiClient:
    def __init__(self, base_url: str, *, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "ApiClient":
        return cls(
            getattr(settings, "API_BASE_URL", "http://localhost:5000"),
            timeout=float(getattr(settings, "API_TIMEOUT", 10.0)),
        )

    def request(self, method: str, path: str, json: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(None, str(e)) from e

        if not response.ok:
            body = response.text or response.reason
            logger.warning("%s %s -> %s", method, path, response.status_code)
            raise ApiError(response.status_code, f"{response.status_code}: {body}")

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s %s -> %s with a non-JSON body", method, path, response.status_code)
            raise ApiError(response.status_code, f"{response.status_code}: unexpected response body") from e

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, payload: Any) -> Any:
        return self.request("POST", path, json=payload)

    def patch(self, path: str, payload: Any) -> Any:
        return self.request("PATCH", path, json=payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
