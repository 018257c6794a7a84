"""
Exceptions raised by the workday helper.
"""

from typing import Any, Optional


class WorkdayHelperError(Exception):
    """Base exception for all workday helper errors."""


class ConfigurationError(WorkdayHelperError, ValueError):
    """Invalid engine configuration, e.g. an unparseable interval date."""


class MalformedEntryError(WorkdayHelperError, ValueError):
    """A public holiday rule or custom closure that cannot be used."""

    def __init__(self, message: str, entry: Any = None, year: Optional[int] = None):
        super().__init__(message)
        self.entry = entry
        self.year = year


class EasterUnavailableError(WorkdayHelperError):
    """The Easter date could not be computed for a year."""

    def __init__(self, message: str, year: int):
        super().__init__(message)
        self.year = year
