"""
Workday helper: counts worked days and lists closing days for a date interval.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set

from workday_helper.core.aggregator import HolidayAggregator
from workday_helper.core.classifier import classify_days
from workday_helper.core.interval import DateInput, build_interval, expand_years
from workday_helper.data.defaults import default_public_holidays
from workday_helper.data.schemas import ClosingEntry, Config, EngineResult
from workday_helper.exceptions import ConfigurationError, WorkdayHelperError
from workday_helper.i18n import Translator

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """Lifecycle of a WorkdayHelper computation."""

    NOT_RUN = "not_run"
    RUNNING = "running"
    DONE = "done"


class WorkdayHelper:
    """Counts the worked days in an interval and builds its closing-day calendar.

    Configuration attributes (``working_days``, ``output_format``,
    ``calculate_easter``, ``language``, ``public_holidays``,
    ``custom_closures``) may be changed until the first call to
    ``workday_count()``, ``calendar()`` or ``result()``. That call runs the
    computation once; afterwards the result is fixed for the lifetime of
    the instance and further configuration changes are ignored.

    Weekdays are numbered like ``date.weekday()``: 0=Monday .. 6=Sunday.

    Example::

        helper = WorkdayHelper("2021-01-01", "2021-01-31")
        helper.custom_closures = [{"date": "2021-01-18", "event": "Strike!"}]
        helper.workday_count()  # 18
    """

    def __init__(self, start_date: DateInput, end_date: DateInput, config: Optional[Config] = None):
        """
        Initialize the helper for an interval.

        Args:
            start_date: First day of the interval (date or date string).
            end_date: Last day of the interval, included.
            config: Optional configuration; defaults to Config().

        Raises:
            ConfigurationError: If a date cannot be parsed or end is before start.
        """
        config = config or Config()

        self.interval = build_interval(start_date, end_date)
        self.years = expand_years(self.interval)

        self.working_days = config.working_days
        self.output_format = config.output_format
        self.calculate_easter = config.calculate_easter
        self.language = config.language
        # None selects the built-in rules, translated into ``language`` at run time
        self.public_holidays: Optional[List[Any]] = (
            None if config.public_holidays is None else list(config.public_holidays)
        )
        self.custom_closures: List[Any] = list(config.custom_closures)

        self._state = RunState.NOT_RUN
        self._result: Optional[EngineResult] = None
        self._errors: List[WorkdayHelperError] = []

    @classmethod
    def from_config_file(
        cls, start_date: DateInput, end_date: DateInput, config_path: Optional[str] = None
    ) -> "WorkdayHelper":
        """Create a helper configured from a YAML file and the environment."""
        from workday_helper.config.manager import ConfigManager

        return cls(start_date, end_date, ConfigManager(config_path).load())

    @property
    def working_days(self) -> Set[int]:
        """Weekdays counted as worked (0=Monday .. 6=Sunday)."""
        return self._working_days

    @working_days.setter
    def working_days(self, days: Iterable[int]) -> None:
        pattern = set()
        for day in days:
            if isinstance(day, bool) or not isinstance(day, int) or day not in range(7):
                raise ConfigurationError(f"Invalid weekday {day!r}: use 0 (Monday) to 6 (Sunday)")
            pattern.add(int(day))
        self._working_days = pattern

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def errors(self) -> List[WorkdayHelperError]:
        """Problems found in holiday rules, closures or Easter calculation."""
        return list(self._errors)

    def workday_count(self) -> int:
        """Number of worked days in the interval."""
        return self.result().workday_count

    def calendar(self) -> Dict[int, ClosingEntry]:
        """Closing days falling on worked weekdays, keyed by timestamp in date order."""
        return self.result().calendar

    def result(self) -> EngineResult:
        """Copy of the full result, running the computation on first access."""
        if self._state is RunState.RUNNING:
            raise WorkdayHelperError("WorkdayHelper result requested while it is being computed")
        if self._result is None:
            self._run()
        return self._result.model_copy(deep=True)  # type: ignore

    def _run(self) -> None:
        self._state = RunState.RUNNING
        logger.debug(f"Computing workdays for {self.interval.start} - {self.interval.end}")
        try:
            aggregator = HolidayAggregator(
                self.years,
                output_format=self.output_format,
                translator=Translator(self.language),
            )
            rules = self.public_holidays
            if rules is None:
                rules = default_public_holidays(self.language)
            closing_table = aggregator.aggregate(
                rules,
                self.custom_closures,
                calculate_easter=self.calculate_easter,
            )
            workdays, calendar = classify_days(self.interval, self._working_days, closing_table)
        except Exception:
            self._state = RunState.NOT_RUN
            raise

        self._errors = aggregator.errors
        self._result = EngineResult(
            start_date=self.interval.start,
            end_date=self.interval.end,
            working_days=sorted(self._working_days),
            workday_count=workdays,
            calendar=calendar,
            warnings=[str(e) for e in aggregator.errors],
        )
        self._state = RunState.DONE
        logger.debug(f"Workdays: {workdays}, closing days on worked weekdays: {len(calendar)}")

    def __repr__(self) -> str:
        return (
            f"WorkdayHelper(start={self.interval.start}, end={self.interval.end}, "
            f"working_days={sorted(self._working_days)}, state={self._state.value!r})"
        )
