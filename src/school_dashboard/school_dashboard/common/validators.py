from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Optional, Type

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_iso_datetime

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

_MISSING = object()


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value: Any, field_name: str, *, minimum: Optional[int] = None) -> int:
    # bool is an int subclass; "true" is never a valid count or id
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        value = int(value.strip())
    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}")
    return value


def require_choice(value: Any, enum_cls: Type[Enum], field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_email(value: Any, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not EMAIL_PATTERN.match(value):
        raise ValidationError(f"{field_name} must be a valid email address")
    return value


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date (YYYY-MM-DD)")


def require_datetime(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return parse_iso_datetime(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date/time")


def require_text_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list")
    out = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f"{field_name} must contain only text")
        if item.strip():
            out.append(item.strip())
    return out


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None


class PayloadValidator:
    """Validate a camelCase JSON payload into a snake_case dict.

    Errors are collected for every field before raising, so a form can show them all at once.
    With `partial=True` only keys present in the payload are checked (PATCH semantics).
    """

    def __init__(self, payload: Any, *, entity: str, partial: bool = False):
        if not isinstance(payload, dict):
            raise ValidationError(f"Invalid {entity} data", [{"field": None, "message": "Body must be a JSON object"}])
        self._payload = payload
        self._entity = entity
        self._partial = partial
        self._clean: dict[str, Any] = {}
        self._errors: list[dict] = []

    def field(
        self,
        key: str,
        attr: str,
        check: Callable[[Any, str], Any],
        *,
        required: bool = False,
        default: Any = _MISSING,
    ) -> "PayloadValidator":
        present = key in self._payload
        value = self._payload.get(key)
        blank = value is None or (isinstance(value, str) and not value.strip())

        if not present:
            if self._partial:
                return self
            if default is not _MISSING:
                self._clean[attr] = default() if callable(default) else default
                return self
            if required:
                self._errors.append({"field": key, "message": f"{key} is required"})
                return self
            self._clean[attr] = None
            return self

        if blank:
            if self._partial and (required or default is not _MISSING):
                self._errors.append({"field": key, "message": f"{key} is required"})
            elif default is not _MISSING:
                self._clean[attr] = default() if callable(default) else default
            elif required:
                self._errors.append({"field": key, "message": f"{key} is required"})
            else:
                self._clean[attr] = None
            return self

        try:
            self._clean[attr] = check(value, key)
        except ValidationError as e:
            self._errors.append({"field": key, "message": str(e)})
        return self

    def result(self) -> dict:
        if self._errors:
            raise ValidationError(f"Invalid {self._entity} data", self._errors)
        return dict(self._clean)


def positive_int(value: Any, field_name: str) -> int:
    return require_int(value, field_name, minimum=1)


def non_negative_int(value: Any, field_name: str) -> int:
    return require_int(value, field_name, minimum=0)


def choice(enum_cls: Type[Enum]) -> Callable[[Any, str], Any]:
    def check(value: Any, field_name: str):
        return require_choice(value, enum_cls, field_name)

    return check
