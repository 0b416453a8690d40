from __future__ import annotations

from datetime import datetime

import pytest

from school_dashboard.client.filters import (
    apply_filters,
    date_window,
    display_name,
    distinct,
    field_equals,
    filter_by_class,
    text_search,
)

STUDENTS = [
    {"id": 1, "firstName": "Amina", "middleName": None, "lastName": "Yusuf", "class": "3", "section": "primary"},
    {"id": 2, "firstName": "Bilal", "middleName": "K", "lastName": "Omar", "class": "4", "section": "primary"},
    {"id": 3, "firstName": "Chen", "middleName": None, "lastName": "Li", "class": "3", "section": "secondary"},
]


def test_empty_select_is_a_no_op():
    assert apply_filters(STUDENTS, field_equals("section", "")) == STUDENTS


def test_field_equality_and_search_combine():
    rows = apply_filters(STUDENTS, field_equals("class", "3"), text_search("YUS", display_name))

    assert [r["id"] for r in rows] == [1]


def test_search_over_composite_name():
    assert [r["id"] for r in apply_filters(STUDENTS, text_search("bilal k omar", display_name))] == [2]


@pytest.mark.parametrize("class_name", ["3", "4", "9", None])
def test_class_filter_only_narrows(class_name):
    rows = filter_by_class(STUDENTS, class_name)

    assert len(rows) <= len(STUDENTS)
    if class_name:
        assert all(r["class"] == class_name for r in rows)


def test_distinct_classes():
    assert distinct(STUDENTS, "class") == ["3", "4"]


def test_date_windows():
    now = datetime(2025, 3, 26, 12, 0)
    rows = [
        {"id": 1, "date": "2025-03-26T08:00:00"},
        {"id": 2, "date": "2025-03-21T08:00:00"},
        {"id": 3, "date": "2025-03-01T08:00:00"},
        {"id": 4, "date": "2025-01-01T08:00:00"},
    ]

    def ids(window):
        return [r["id"] for r in apply_filters(rows, date_window("date", window, now=now))]

    assert ids("today") == [1]
    assert ids("week") == [1, 2]
    assert ids("month") == [1, 2, 3]
    assert ids(None) == [1, 2, 3, 4]
