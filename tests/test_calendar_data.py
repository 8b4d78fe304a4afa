"""
Tests for bikram_sambat.calendar_data
"""
import pytest

from bikram_sambat import calendar_data
from bikram_sambat.calendar_data import CALENDAR_DATA, MAX_YEAR, MIN_YEAR


class TestCalendarTable:

    def test_covers_1970_to_2100_without_gaps(self):
        assert MIN_YEAR == 1970
        assert MAX_YEAR == 2100
        assert sorted(CALENDAR_DATA) == list(range(1970, 2101))

    def test_every_year_has_twelve_month_lengths(self):
        for year, record in CALENDAR_DATA.items():
            assert len(record.month_lengths) == 12, year
            assert all(29 <= days <= 32 for days in record.month_lengths), year

    def test_first_jan_offset_is_a_day_of_paush(self):
        for year, record in CALENDAR_DATA.items():
            assert 1 <= record.first_jan_offset <= record.month_lengths[8], year

    def test_known_rows(self):
        assert CALENDAR_DATA[1970] == (18, (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30))
        assert CALENDAR_DATA[2077].first_jan_offset == 17
        assert CALENDAR_DATA[2077].month_lengths == (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31)
        assert CALENDAR_DATA[2100] == (17, (31, 32, 31, 32, 30, 31, 30, 29, 30, 29, 30, 30))

    def test_month_names(self):
        assert calendar_data.NEPALI_MONTHS[0] == 'Baisakh'
        assert calendar_data.NEPALI_MONTHS[8] == 'Paush'
        assert calendar_data.NEPALI_MONTHS[11] == 'Chaitra'
        assert len(set(calendar_data.NEPALI_MONTHS)) == 12


class TestLookup:

    def test_supported_year(self):
        record = calendar_data.lookup(2068)
        assert record.first_jan_offset == 17

    @pytest.mark.parametrize("year", [1969, 2101, 0, -1])
    def test_unsupported_year_is_none(self, year):
        assert calendar_data.lookup(year) is None
        assert not calendar_data.is_supported_year(year)

    def test_days_in_month(self):
        assert calendar_data.days_in_month(2076, 2) == 32
        assert calendar_data.days_in_month(2067, 12) == 30

    def test_days_in_month_rejects_bad_month(self):
        with pytest.raises(IndexError):
            calendar_data.days_in_month(2076, 13)

    def test_days_in_month_rejects_unknown_year(self):
        with pytest.raises(KeyError):
            calendar_data.days_in_month(1969, 1)

    def test_days_in_year(self):
        assert calendar_data.days_in_year(2077) == 366
        assert calendar_data.days_in_year(2078) == 365
