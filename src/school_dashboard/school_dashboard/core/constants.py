"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_RESULT_TOTAL = 100
PASS_PERCENTAGE = 60

# (minimum percentage, letter), checked top-down
GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"

TREND_DAYS = 7
ANALYTICS_PERIOD_DAYS = {"all": None, "week": 7, "month": 30}
