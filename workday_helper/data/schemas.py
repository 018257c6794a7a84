"""
Data models for the workday helper using Pydantic.
"""

from datetime import date, datetime, time
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Weekday(IntEnum):
    """Weekday identifiers, numbered like ``date.weekday()`` (Monday = 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


DEFAULT_WORKING_DAYS = frozenset(
    {Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY}
)


class ClosingType(str, Enum):
    """Source of a closing day."""

    PUBLIC = "public"
    CUSTOM = "custom"


class PublicHolidayRule(BaseModel):
    """A holiday recurring every year on the same month and day."""

    month_day: str = Field(
        ...,
        validation_alias=AliasChoices("month_day", "m-d"),
        description="Month and day in MM-DD format",
    )
    event: str = Field(..., description="Name of the holiday")
    options: Optional[Dict[str, Any]] = Field(
        default=None, description="Opaque values passed through to the output"
    )

    @field_validator("month_day")
    @classmethod
    def validate_month_day(cls, v: str) -> str:
        """Validate MM-DD format against a leap year so 02-29 is accepted."""
        parts = v.split("-")
        if len(parts) != 2 or not all(len(p) == 2 and p.isdigit() for p in parts):
            raise ValueError("month_day must be in MM-DD format")
        try:
            date(2000, int(parts[0]), int(parts[1]))
        except ValueError:
            raise ValueError(f"month_day {v} is not a valid calendar day")
        return v

    def for_year(self, year: int) -> date:
        """
        Resolve the rule to a concrete date.

        Raises:
            ValueError: If the month-day does not exist in that year.
        """
        month, day = self.month_day.split("-")
        return date(year, int(month), int(day))


class CustomClosure(BaseModel):
    """A single explicitly dated closing day supplied by the caller."""

    closure_date: date = Field(
        ...,
        validation_alias=AliasChoices("date", "closure_date"),
        description="Date of the closure (YYYY-MM-DD)",
    )
    event: str = Field(..., description="Name of the closure")
    options: Optional[Dict[str, Any]] = Field(
        default=None, description="Opaque values passed through to the output"
    )


class ClosingEntry(BaseModel):
    """A closing day as reported in the holiday calendar."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Seconds since epoch at local midnight")
    closing_date: date = Field(..., description="Calendar day of the closure")
    date: str = Field(..., description="Closing day formatted with the output format")
    event: str = Field(..., description="Name of the event")
    type: ClosingType = Field(..., description="public or custom")
    options: Optional[Dict[str, Any]] = Field(default=None, description="Options of the source entry")


def day_timestamp(day: date) -> int:
    """Unix timestamp of local midnight on ``day``."""
    return int(datetime.combine(day, time.min).timestamp())


class DateInterval(BaseModel):
    """Closed interval of calendar days."""

    model_config = ConfigDict(frozen=True)

    start: date = Field(..., description="First day of the interval")
    end: date = Field(..., description="Last day of the interval")

    @field_validator("end")
    @classmethod
    def validate_date_range(cls, v: date, info) -> date:
        """Ensure end is after or equal to start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end date must be after or equal to start date")
        return v


class EngineResult(BaseModel):
    """Complete result of a workday helper run."""

    model_config = ConfigDict(frozen=True)

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")
    working_days: List[int] = Field(..., description="Weekdays counted as worked")
    workday_count: int = Field(..., ge=0, description="Number of worked days")
    calendar: Dict[int, ClosingEntry] = Field(
        default_factory=dict, description="Closing days on worked weekdays, by timestamp"
    )
    warnings: List[str] = Field(default_factory=list, description="Problems found in the input entries")


def normalize_language(v: str) -> str:
    lang = v.lower().strip()
    if lang in ("it", "italian", "italiano", "it-it", "it_it"):
        return "it"
    return "en"


class Config(BaseModel):
    """Configuration for the workday helper."""

    working_days: List[int] = Field(
        default_factory=lambda: sorted(int(d) for d in DEFAULT_WORKING_DAYS),
        description="Weekdays counted as worked (0=Monday .. 6=Sunday)",
    )
    output_format: str = Field(default="%Y-%m-%d", description="strftime pattern for closing dates")
    calculate_easter: bool = Field(default=True, description="Add Easter and Easter Monday")
    language: str = Field(default="en", description="Language for holiday names (en or it)")
    public_holidays: Optional[List[Union[Dict[str, Any], PublicHolidayRule]]] = Field(
        default=None, description="Public holiday rules; None uses the built-in set"
    )
    custom_closures: List[Union[Dict[str, Any], CustomClosure]] = Field(
        default_factory=list, description="Custom closing days"
    )

    @field_validator("working_days")
    @classmethod
    def validate_working_days(cls, v: List[int]) -> List[int]:
        """Validate weekday identifiers."""
        for day in v:
            if day not in range(7):
                raise ValueError(f"weekday {day} out of range 0-6 (0=Monday)")
        return sorted(set(v))

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalize the language code."""
        return normalize_language(v)
