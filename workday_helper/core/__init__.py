"""
Core logic for workday counting and closing-day aggregation.
"""

from workday_helper.core.aggregator import HolidayAggregator
from workday_helper.core.classifier import classify_days
from workday_helper.core.easter import easter_dates, easter_sunday
from workday_helper.core.engine import RunState, WorkdayHelper
from workday_helper.core.interval import build_interval, expand_years, parse_date

__all__ = [
    "HolidayAggregator",
    "RunState",
    "WorkdayHelper",
    "build_interval",
    "classify_days",
    "easter_dates",
    "easter_sunday",
    "expand_years",
    "parse_date",
]
