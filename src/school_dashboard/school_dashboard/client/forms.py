from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..attendance.schema import validate_attendance
from ..classrooms.schema import validate_classroom
from ..core.exceptions import ValidationError
from ..employees.schema import validate_employee
from ..exams.schema import validate_exam
from ..payments.schema import validate_payment
from ..results.schema import validate_result
from ..students.schema import validate_student
from .api_client import ApiClient, ApiError
from .notifications import LoggingNotifier, Notifier, Variant
from .query_cache import QueryCache

logger = logging.getLogger(__name__)

Validator = Callable[..., dict]

VALIDATORS: dict[str, Validator] = {
    "/api/students": validate_student,
    "/api/employees": validate_employee,
    "/api/classrooms": validate_classroom,
    "/api/attendance": validate_attendance,
    "/api/payments": validate_payment,
    "/api/exams": validate_exam,
    "/api/results": validate_result,
}

# keys that also go stale when a resource changes
EXTRA_INVALIDATIONS = {
    "/api/payments": ("/api/stats",),
}


def describe_errors(error: ValidationError) -> str:
    if not error.errors:
        return str(error)
    return "; ".join(f"{e['field']}: {e['message']}" if e.get("field") else e["message"] for e in error.errors)


class FormSubmitter:
    """Create/edit form for one resource.

    The payload is checked with the same schema the server uses, and nothing is
    sent while it is invalid.
    """

    def __init__(
        self,
        api: ApiClient,
        cache: QueryCache,
        resource_path: str,
        *,
        notifier: Optional[Notifier] = None,
        validator: Optional[Validator] = None,
    ):
        self.resource_path = resource_path.rstrip("/")
        validator = validator or VALIDATORS.get(self.resource_path)
        if validator is None:
            raise ValueError(f"No form schema for {resource_path}")
        self._api = api
        self._cache = cache
        self._validator = validator
        self._notifier = notifier or LoggingNotifier()

    def create(self, payload: dict) -> Optional[Any]:
        return self._submit("POST", self.resource_path, payload, partial=False)

    def update(self, item_id: int, payload: dict) -> Optional[Any]:
        return self._submit("PATCH", f"{self.resource_path}/{item_id}", payload, partial=True)

    def _submit(self, method: str, path: str, payload: dict, *, partial: bool) -> Optional[Any]:
        try:
            self._validator(payload, partial=partial)
        except ValidationError as e:
            self._notifier.notify("Validation error", describe_errors(e), Variant.DESTRUCTIVE)
            return None

        try:
            saved = self._api.request(method, path, json=payload)
        except ApiError as e:
            self._notifier.notify("Error", f"Failed to save: {e.message}", Variant.DESTRUCTIVE)
            return None

        logger.debug("%s %s saved", method, path)
        self._cache.invalidate(self.resource_path)
        for key in EXTRA_INVALIDATIONS.get(self.resource_path, ()):
            self._cache.invalidate(key)
        self._notifier.notify("Success", "Record created" if method == "POST" else "Record updated")
        return saved
