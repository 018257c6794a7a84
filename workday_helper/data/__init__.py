"""
Data models and schemas for the workday helper.
"""

from workday_helper.data.schemas import (
    ClosingEntry,
    ClosingType,
    Config,
    CustomClosure,
    DateInterval,
    EngineResult,
    PublicHolidayRule,
    Weekday,
)

__all__ = [
    "ClosingEntry",
    "ClosingType",
    "Config",
    "CustomClosure",
    "DateInterval",
    "EngineResult",
    "PublicHolidayRule",
    "Weekday",
]
