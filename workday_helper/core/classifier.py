"""
Day-by-day classification of an interval into workdays and closing days.
"""

from datetime import date, timedelta
from typing import Collection, Dict, Mapping, Tuple

from workday_helper.data.schemas import ClosingEntry, DateInterval


def classify_days(
    interval: DateInterval,
    working_days: Collection[int],
    closing_table: Mapping[date, ClosingEntry],
) -> Tuple[int, Dict[int, ClosingEntry]]:
    """
    Count workdays and collect the closing days that replace them.

    Days whose weekday is not in ``working_days`` are skipped entirely,
    even when they are in the closing table.

    Args:
        interval: Days to classify, both ends included.
        working_days: Weekdays counted as worked (0=Monday .. 6=Sunday).
        closing_table: Closing entries keyed by day.

    Returns:
        Tuple of (workday count, closing entries by timestamp in chronological order).
    """
    pattern = {int(d) for d in working_days}
    workdays = 0
    calendar: Dict[int, ClosingEntry] = {}

    current = interval.start
    while current <= interval.end:
        if current.weekday() in pattern:
            entry = closing_table.get(current)
            if entry is None:
                workdays += 1
            else:
                calendar[entry.timestamp] = entry
        if current == date.max:
            break
        current += timedelta(days=1)

    return workdays, calendar
