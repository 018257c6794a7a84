"""
Tests for the holiday aggregator.
"""

from datetime import date

import pytest

from workday_helper.core.aggregator import HolidayAggregator
from workday_helper.data.defaults import default_public_holidays
from workday_helper.data.schemas import ClosingType, CustomClosure, PublicHolidayRule
from workday_helper.exceptions import MalformedEntryError
from workday_helper.i18n import Translator


@pytest.fixture
def aggregator():
    """Aggregator for 2021."""
    return HolidayAggregator([2021])


class TestPublicHolidays:
    """Tests for rule-based holidays."""

    def test_defaults_for_every_year(self):
        aggregator = HolidayAggregator([2021, 2022])
        aggregator.add_public_holidays(default_public_holidays())
        assert len(aggregator.table) == 20
        assert aggregator.table[date(2022, 8, 15)].event == "Assumption Day"

    def test_historical_key_accepted(self, aggregator):
        aggregator.add_public_holidays([{"m-d": "06-02", "event": "Festa della Repubblica"}])
        entry = aggregator.table[date(2021, 6, 2)]
        assert entry.type == ClosingType.PUBLIC
        assert entry.options is None

    @pytest.mark.parametrize("month_day", ["1-1", "13-01", "02-30", "0101", ""])
    def test_invalid_month_day_is_malformed(self, aggregator, month_day):
        aggregator.add_public_holidays([{"month_day": month_day, "event": "Bad"}])
        assert aggregator.table == {}
        assert len(aggregator.errors) == 1
        assert isinstance(aggregator.errors[0], MalformedEntryError)

    def test_non_mapping_entry_is_malformed(self, aggregator):
        aggregator.add_public_holidays(["01-01", PublicHolidayRule(month_day="12-25", event="Christmas Day")])
        assert list(aggregator.table) == [date(2021, 12, 25)]
        assert len(aggregator.errors) == 1

    def test_defaults_are_not_shared(self):
        first = default_public_holidays()
        first.clear()
        assert len(default_public_holidays()) == 10


class TestInsertionOrder:
    """Later insertions win on the same day."""

    def test_easter_overrides_rule_on_same_day(self, aggregator):
        aggregator.aggregate(
            [{"month_day": "04-05", "event": "Local Fair"}],
            [],
            calculate_easter=True,
        )
        assert aggregator.table[date(2021, 4, 5)].event == "Easter Monday"

    def test_custom_closures_in_list_order(self, aggregator):
        aggregator.aggregate(
            [],
            [
                {"date": "2021-03-01", "event": "First"},
                CustomClosure(closure_date=date(2021, 3, 1), event="Second"),
            ],
            calculate_easter=False,
        )
        entry = aggregator.table[date(2021, 3, 1)]
        assert entry.event == "Second"
        assert entry.type == ClosingType.CUSTOM

    def test_custom_closure_outside_years_is_kept(self, aggregator):
        aggregator.add_custom_closures([{"date": "2030-01-02", "event": "Far away"}])
        assert date(2030, 1, 2) in aggregator.table


class TestTranslations:
    """Tests for translated names and diagnostics."""

    def test_italian_easter_names(self):
        aggregator = HolidayAggregator([2021], translator=Translator("italiano"))
        aggregator.add_easter_dates()
        assert aggregator.table[date(2021, 4, 4)].event == "Pasqua"
        assert aggregator.table[date(2021, 4, 5)].event == "Lunedì dell'Angelo"

    def test_italian_defaults(self):
        names = [rule.event for rule in default_public_holidays("it")]
        assert names[0] == "Capodanno"
        assert names[-1] == "Santo Stefano"

    def test_unknown_language_falls_back_to_english(self):
        assert Translator("fr")("holiday.easter") == "Easter"
