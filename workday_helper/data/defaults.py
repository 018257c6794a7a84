"""
Built-in Italian national public holidays.
"""

from typing import List, Tuple

from workday_helper.data.schemas import PublicHolidayRule
from workday_helper.i18n import Translator

# (month-day, translation key, options)
DEFAULT_PUBLIC_HOLIDAYS: Tuple[Tuple[str, str, Tuple[Tuple[str, str], ...]], ...] = (
    ("01-01", "holiday.new_year", (("htmlClass", "blue"),)),
    ("01-06", "holiday.epiphany", ()),
    ("04-25", "holiday.liberation_day", ()),
    ("05-01", "holiday.labour_day", ()),
    ("06-02", "holiday.republic_day", ()),
    ("08-15", "holiday.assumption", ()),
    ("11-01", "holiday.all_saints", ()),
    ("12-08", "holiday.immaculate_conception", ()),
    ("12-25", "holiday.christmas", ()),
    ("12-26", "holiday.st_stephen", ()),
)


def default_public_holidays(language: str = "en") -> List[PublicHolidayRule]:
    """
    Build a fresh list of the default public holiday rules.

    Every call returns new objects, so callers may edit the list freely.

    Args:
        language: Language for the event names ('en' or 'it').

    Returns:
        List of PublicHolidayRule in calendar order.
    """
    t = Translator(language)
    return [
        PublicHolidayRule(month_day=month_day, event=t(key), options=dict(options) or None)
        for month_day, key, options in DEFAULT_PUBLIC_HOLIDAYS
    ]
