from __future__ import annotations

from ..core.constants import FAILING_GRADE, GRADE_THRESHOLDS, PASS_PERCENTAGE


def percentage(score: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return score * 100.0 / total


def calculate_grade(score: int, total: int) -> str:
    """Letter grade for a score: A >= 90%, B >= 80%, C >= 70%, D >= 60%, else F."""
    pct = percentage(score, total)
    for minimum, letter in GRADE_THRESHOLDS:
        if pct >= minimum:
            return letter
    return FAILING_GRADE


def is_pass(score: int, total: int) -> bool:
    return percentage(score, total) >= PASS_PERCENTAGE
