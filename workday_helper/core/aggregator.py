"""
Merges public holidays, Easter dates and custom closures into one table.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from workday_helper.core.easter import easter_dates
from workday_helper.data.schemas import (
    ClosingEntry,
    ClosingType,
    CustomClosure,
    PublicHolidayRule,
    day_timestamp,
)
from workday_helper.exceptions import (
    EasterUnavailableError,
    MalformedEntryError,
    WorkdayHelperError,
)
from workday_helper.i18n import Translator

logger = logging.getLogger(__name__)

EntryModel = TypeVar("EntryModel", bound=BaseModel)


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


class HolidayAggregator:
    """Builds the date-keyed closing table for a set of years.

    Entries are inserted in a fixed order: public holiday rules for every
    year, then Easter dates for every year, then custom closures. A later
    insertion on the same day replaces the earlier one.
    """

    def __init__(
        self,
        years: Iterable[int],
        output_format: str = "%Y-%m-%d",
        translator: Optional[Translator] = None,
        easter_calculator: Callable[[int], Tuple[date, date]] = easter_dates,
    ):
        """
        Initialize the aggregator.

        Args:
            years: Years for which rule-based holidays are generated.
            output_format: strftime pattern for the ``date`` field of entries.
            translator: Translator for Easter names and diagnostics.
            easter_calculator: Function returning (Easter Sunday, Easter Monday) for a year.
        """
        self.years = list(years)
        self.output_format = output_format
        self.translator = translator or Translator()
        self.easter_calculator = easter_calculator
        self.table: Dict[date, ClosingEntry] = {}
        self.errors: List[WorkdayHelperError] = []

    def aggregate(
        self,
        public_holidays: Iterable[Any],
        custom_closures: Iterable[Any],
        calculate_easter: bool = True,
    ) -> Dict[date, ClosingEntry]:
        """
        Run all three insertion steps and return the resulting table.

        Args:
            public_holidays: PublicHolidayRule objects or mappings.
            custom_closures: CustomClosure objects or mappings.
            calculate_easter: Whether to add Easter Sunday and Monday.

        Returns:
            Closing entries keyed by calendar day.
        """
        self.add_public_holidays(public_holidays)
        if calculate_easter:
            self.add_easter_dates()
        self.add_custom_closures(custom_closures)
        logger.debug(
            f"Aggregated {len(self.table)} closing days for years {self.years} "
            f"({len(self.errors)} problems)"
        )
        return self.table

    def add_closing(
        self,
        day: date,
        event: str,
        closing_type: ClosingType,
        options: Optional[Dict[str, Any]] = None,
    ) -> ClosingEntry:
        """Insert a closing day, replacing any entry already on that day."""
        entry = ClosingEntry(
            timestamp=day_timestamp(day),
            closing_date=day,
            date=day.strftime(self.output_format),
            event=event,
            type=closing_type,
            options=options,
        )
        self.table[day] = entry
        return entry

    def add_public_holidays(self, rules: Iterable[Any]) -> None:
        valid_rules = [
            rule
            for rule in (self._coerce(PublicHolidayRule, raw, "warning.malformed_rule") for raw in rules)
            if rule is not None
        ]
        for year in self.years:
            for rule in valid_rules:
                try:
                    day = rule.for_year(year)
                except ValueError as e:
                    self._record(
                        MalformedEntryError(
                            self.translator(
                                "warning.malformed_rule_year",
                                entry=rule.month_day,
                                year=year,
                                reason=str(e),
                            ),
                            entry=rule,
                            year=year,
                        )
                    )
                    continue
                self.add_closing(day, rule.event, ClosingType.PUBLIC, rule.options)

    def add_easter_dates(self) -> None:
        for year in self.years:
            try:
                sunday, monday = self.easter_calculator(year)
            except EasterUnavailableError as e:
                self._record(
                    EasterUnavailableError(
                        self.translator("warning.easter_unavailable", year=year, reason=str(e)),
                        year,
                    )
                )
                continue
            self.add_closing(sunday, self.translator("holiday.easter"), ClosingType.PUBLIC)
            self.add_closing(monday, self.translator("holiday.easter_monday"), ClosingType.PUBLIC)

    def add_custom_closures(self, closures: Iterable[Any]) -> None:
        for raw in closures:
            closure = self._coerce(CustomClosure, raw, "warning.malformed_closure")
            if closure is None:
                continue
            self.add_closing(closure.closure_date, closure.event, ClosingType.CUSTOM, closure.options)

    def _coerce(self, model: Type[EntryModel], raw: Any, message_key: str) -> Optional[EntryModel]:
        """Validate a raw entry, recording a MalformedEntryError on failure."""
        if isinstance(raw, model):
            return raw
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            self._record(
                MalformedEntryError(
                    self.translator(message_key, entry=repr(raw), reason=_describe_validation_error(e)),
                    entry=raw,
                )
            )
            return None

    def _record(self, error: WorkdayHelperError) -> None:
        logger.warning(str(error))
        self.errors.append(error)
