"""Client-side predicate chains used by the list views.

Items are the JSON objects returned by the API, so field names are the
camelCase wire keys ("class", "studentId", ...).
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from ..common.datetime_utils import now_local, parse_iso_datetime

Predicate = Callable[[Any], bool]
FieldOrFn = Union[str, Callable[[Any], Any]]

DATE_WINDOWS = ("today", "week", "month")


def _value(item: Any, field: FieldOrFn) -> Any:
    if callable(field):
        return field(item)
    if isinstance(item, dict):
        return item.get(field)
    return getattr(item, field, None)


def _always(_item: Any) -> bool:
    return True


def field_equals(field: str, value: Any) -> Predicate:
    # an empty select ("All classes") filters nothing
    if value is None or value == "":
        return _always
    return lambda item: _value(item, field) == value


def text_search(term: Optional[str], *fields: FieldOrFn) -> Predicate:
    needle = (term or "").strip().lower()
    if not needle:
        return _always

    def predicate(item: Any) -> bool:
        for field in fields:
            value = _value(item, field)
            if value is not None and needle in str(value).lower():
                return True
        return False

    return predicate


def date_window(field: str, window: Optional[str], *, now: Optional[datetime] = None) -> Predicate:
    """today: same calendar day; week: the last 7 days; month: the last 30 days."""
    if not window:
        return _always
    if window not in DATE_WINDOWS:
        raise ValueError(f"Unknown date window: {window}")

    current = now or now_local()
    today = current.date()
    start = {"today": today, "week": today - timedelta(days=6), "month": today - timedelta(days=29)}[window]

    def predicate(item: Any) -> bool:
        raw = _value(item, field)
        if raw is None:
            return False
        try:
            day = (raw if isinstance(raw, datetime) else parse_iso_datetime(str(raw))).date()
        except ValueError:
            return False
        return start <= day <= today

    return predicate


def apply_filters(items: Iterable[Any], *predicates: Predicate) -> list:
    return [item for item in items if all(p(item) for p in predicates)]


def distinct(items: Iterable[Any], field: FieldOrFn) -> list:
    values = {_value(item, field) for item in items}
    return sorted(v for v in values if v not in (None, ""))


def filter_by_class(students: Sequence[Any], class_name: Optional[str]) -> list:
    return apply_filters(students, field_equals("class", class_name))


def display_name(item: Any) -> str:
    """Composite name used by searches: "First Middle Last", or `name` for non-people."""
    parts = [_value(item, k) for k in ("firstName", "middleName", "lastName")]
    name = " ".join(p for p in parts if p)
    return name or str(_value(item, "name") or "")
