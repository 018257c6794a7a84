"""
Tests for Easter date calculation.
"""

from datetime import date

import holidays
import pytest

from workday_helper.core.aggregator import HolidayAggregator
from workday_helper.core.easter import easter_dates, easter_sunday
from workday_helper.exceptions import EasterUnavailableError


class TestEasterCalculator:
    """Tests for easter_sunday and easter_dates."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (1583, date(1583, 4, 10)),
            (2000, date(2000, 4, 23)),
            (2021, date(2021, 4, 4)),
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
        ],
    )
    def test_known_dates(self, year, expected):
        assert easter_sunday(year) == expected

    def test_easter_monday_follows_sunday(self):
        sunday, monday = easter_dates(2021)
        assert sunday == date(2021, 4, 4)
        assert monday == date(2021, 4, 5)
        assert monday.weekday() == 0

    def test_matches_italian_holiday_calendar(self):
        years = range(2000, 2051)
        it_holidays = holidays.Italy(years=years)
        for year in years:
            _, monday = easter_dates(year)
            assert monday in it_holidays, f"Easter Monday {monday} missing for {year}"

    def test_invalid_year_raises(self):
        with pytest.raises(EasterUnavailableError) as exc_info:
            easter_sunday(0)
        assert exc_info.value.year == 0


class TestEasterUnavailable:
    """Easter failures are recorded per year and do not stop aggregation."""

    def test_failure_is_recorded(self):
        def broken_calculator(year):
            if year == 2021:
                raise EasterUnavailableError("no calendar support", year)
            return easter_dates(year)

        aggregator = HolidayAggregator([2021, 2022], easter_calculator=broken_calculator)
        table = aggregator.aggregate([], [], calculate_easter=True)

        assert date(2021, 4, 4) not in table
        assert table[date(2022, 4, 17)].event == "Easter"
        assert table[date(2022, 4, 18)].event == "Easter Monday"
        assert len(aggregator.errors) == 1
        assert isinstance(aggregator.errors[0], EasterUnavailableError)
        assert aggregator.errors[0].year == 2021

    def test_disabled_easter_records_nothing(self):
        def failing_calculator(year):
            raise EasterUnavailableError("should not be called", year)

        aggregator = HolidayAggregator([2021], easter_calculator=failing_calculator)
        table = aggregator.aggregate([], [], calculate_easter=False)

        assert table == {}
        assert aggregator.errors == []
