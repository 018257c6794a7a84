"""
workday_helper
~~~~~~~~~~~~~~

Counts the worked days in a date interval and lists the closing days that
fall on them: fixed-date public holidays, Easter and Easter Monday, and
custom closures.

Basic usage::

    from workday_helper import WorkdayHelper

    helper = WorkdayHelper("2021-04-01", "2021-04-30")
    helper.working_days = {0, 2, 4}      # Mon, Wed, Fri
    helper.workday_count()
    helper.calendar()                     # {timestamp: ClosingEntry, ...}
"""

from workday_helper.core.engine import RunState, WorkdayHelper
from workday_helper.data.defaults import default_public_holidays
from workday_helper.data.schemas import (
    ClosingEntry,
    ClosingType,
    Config,
    CustomClosure,
    EngineResult,
    PublicHolidayRule,
    Weekday,
)
from workday_helper.exceptions import (
    ConfigurationError,
    EasterUnavailableError,
    MalformedEntryError,
    WorkdayHelperError,
)

__version__ = "0.1.0"

__all__ = [
    "ClosingEntry",
    "ClosingType",
    "Config",
    "ConfigurationError",
    "CustomClosure",
    "EasterUnavailableError",
    "EngineResult",
    "MalformedEntryError",
    "PublicHolidayRule",
    "RunState",
    "Weekday",
    "WorkdayHelper",
    "WorkdayHelperError",
    "default_public_holidays",
]
