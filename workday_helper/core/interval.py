"""
Date parsing and expansion of an interval into the years it spans.
"""

from datetime import date, datetime
from typing import List, Union

from pydantic import ValidationError

from workday_helper.data.schemas import DateInterval
from workday_helper.exceptions import ConfigurationError

DateInput = Union[str, date, datetime]

DATE_FORMATS = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]


def parse_date(value: DateInput) -> date:
    """
    Parse a date given as a string or date object.

    Strings may be YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY. Datetimes are
    truncated to their calendar day.

    Raises:
        ConfigurationError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
    raise ConfigurationError(
        f"Invalid date: {value!r}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def build_interval(start: DateInput, end: DateInput) -> DateInterval:
    """
    Parse both ends of an interval.

    Raises:
        ConfigurationError: If a date is unparseable or end is before start.
    """
    start_date = parse_date(start)
    end_date = parse_date(end)
    try:
        return DateInterval(start=start_date, end=end_date)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid interval {start_date} - {end_date}: {e}") from e


def expand_years(interval: DateInterval) -> List[int]:
    """Every calendar year touched by the interval, in ascending order."""
    return list(range(interval.start.year, interval.end.year + 1))
