"""
Gregorian Easter dates.
"""

from datetime import date, timedelta
from typing import Tuple

from dateutil.easter import EASTER_WESTERN, easter

from workday_helper.exceptions import EasterUnavailableError


def easter_sunday(year: int) -> date:
    """
    Compute Easter Sunday for a year in the Gregorian reckoning.

    Args:
        year: Calendar year.

    Returns:
        Date of Easter Sunday.

    Raises:
        EasterUnavailableError: If the date cannot be computed for the year.
    """
    try:
        return easter(year, EASTER_WESTERN)
    except (ValueError, OverflowError) as e:
        raise EasterUnavailableError(str(e), year) from e


def easter_dates(year: int) -> Tuple[date, date]:
    """
    Compute Easter Sunday and Easter Monday for a year.

    Raises:
        EasterUnavailableError: If the dates cannot be computed for the year.
    """
    sunday = easter_sunday(year)
    try:
        monday = sunday + timedelta(days=1)
    except OverflowError as e:
        raise EasterUnavailableError(str(e), year) from e
    return sunday, monday
