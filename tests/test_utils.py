"""
Tests for the cached helpers and fiscal year utilities (bikram_sambat.utils)
"""
from datetime import date, datetime, timezone

import pytest
from django.core.cache import cache

from bikram_sambat import utils
from bikram_sambat.conf import get_setting
from bikram_sambat.exceptions import InvalidDateError, MissingCalendarDataError


class TestBsToAd:

    def test_converts(self):
        assert utils.bs_to_ad(2068, 9, 1) == date(2011, 12, 16)

    def test_result_is_cached(self):
        utils.bs_to_ad(2077, 9, 16)
        assert cache.get('bs_bs_to_ad_2077_9_16') == date(2020, 12, 31)

    def test_cached_value_is_returned(self):
        cache.set('bs_bs_to_ad_2077_9_16', date(2000, 1, 1))
        assert utils.bs_to_ad(2077, 9, 16) == date(2000, 1, 1)

    def test_cache_can_be_disabled(self, settings):
        settings.BIKRAM_SAMBAT = {'CACHE_ENABLED': False}
        assert utils.bs_to_ad(2077, 9, 16) == date(2020, 12, 31)
        assert cache.get('bs_bs_to_ad_2077_9_16') is None

    def test_cache_prefix(self, settings):
        settings.BIKRAM_SAMBAT = {'CACHE_PREFIX': 'nepal'}
        utils.bs_to_ad(2077, 9, 16)
        assert cache.get('nepal_bs_to_ad_2077_9_16') == date(2020, 12, 31)

    def test_invalid_date(self):
        with pytest.raises(InvalidDateError):
            utils.bs_to_ad(1969, 1, 1)

    def test_missing_data(self):
        with pytest.raises(MissingCalendarDataError):
            utils.bs_to_ad(1970, 1, 1)


class TestAdToBs:

    def test_from_string(self):
        assert utils.ad_to_bs('2020-12-31') == {
            'year': 2077, 'month': 9, 'day': 16, 'month_name': 'Paush',
        }

    def test_from_datetime(self):
        result = utils.ad_to_bs(datetime(2011, 4, 14, 15, 30))
        assert (result['year'], result['month'], result['day']) == (2068, 1, 1)
        assert result['month_name'] == 'Baisakh'

    def test_from_date(self):
        assert utils.ad_to_bs(date(2020, 2, 29))['month_name'] == 'Falgun'

    def test_result_is_cached(self):
        utils.ad_to_bs(date(2020, 12, 31))
        assert cache.get('bs_ad_to_bs_2020-12-31')['day'] == 16

    def test_invalid_string(self):
        with pytest.raises(InvalidDateError):
            utils.ad_to_bs('2019-02-29')
        with pytest.raises(ValueError):
            utils.ad_to_bs('not a date')

    def test_out_of_range(self):
        with pytest.raises(MissingCalendarDataError):
            utils.ad_to_bs('1913-01-01')


class TestFiscalYear:

    @pytest.mark.parametrize("value,expected", [
        ({'year': 2080, 'month': 4}, '2080/81'),
        ({'year': 2080, 'month': 3}, '2079/80'),
        ({'year': 2080, 'month': 12}, '2080/81'),
        ({'year': 2099, 'month': 5}, '2099/00'),
    ])
    def test_from_bs_dict(self, value, expected):
        assert utils.get_fiscal_year(value) == expected

    def test_from_bsdate(self):
        assert utils.get_fiscal_year(utils.new(1, 12, 2081)) == '2081/82'

    def test_from_ad_date(self):
        # 2019-06-16 is Ashadh 1, 2076
        assert utils.get_fiscal_year(date(2019, 6, 16)) == '2075/76'

    def test_dict_format(self):
        assert utils.get_fiscal_year({'year': 2080, 'month': 1}, format='dict') == {
            'start_year': 2079, 'end_year': 2080,
        }

    def test_fiscal_year_dates(self):
        start, end = utils.get_fiscal_year_dates('2075/76')
        assert start == date(2018, 7, 17)
        assert end == date(2019, 7, 16)

    def test_fiscal_year_dates_outside_table(self):
        with pytest.raises(InvalidDateError):
            utils.get_fiscal_year_dates('2100/01')

    def test_fiscal_year_dates_end_uses_last_day_of_ashadh(self):
        # Ashadh 2076 has 31 days
        _, end = utils.get_fiscal_year_dates('2075/76')
        assert utils.ad_to_bs(end) == {'year': 2076, 'month': 3, 'day': 31, 'month_name': 'Ashadh'}

    def test_fiscal_year_dates_first_year_in_table(self):
        with pytest.raises(MissingCalendarDataError):
            utils.get_fiscal_year_dates('1970/71')

    def test_fiscal_year_dates_bad_string(self):
        with pytest.raises(ValueError):
            utils.get_fiscal_year_dates('FY80')

    def test_current_fiscal_year(self, monkeypatch):
        monkeypatch.setattr(
            'django.utils.timezone.now',
            lambda: datetime(2020, 12, 31, 6, 0, tzinfo=timezone.utc),
        )
        assert utils.get_current_fiscal_year() == '2077/78'

    def test_current_fiscal_year_uses_local_date(self, monkeypatch):
        # 20:00 UTC on 2020-07-15 is already 2020-07-16 (Shrawan 1, 2077) in Kathmandu
        monkeypatch.setattr(
            'django.utils.timezone.now',
            lambda: datetime(2020, 7, 15, 20, 0, tzinfo=timezone.utc),
        )
        assert utils.get_current_fiscal_year() == '2077/78'

    def test_current_fiscal_year_naive_now(self, monkeypatch, settings):
        settings.USE_TZ = False
        monkeypatch.setattr('django.utils.timezone.now', lambda: datetime(2020, 7, 15, 12, 0))
        assert utils.get_current_fiscal_year() == '2076/77'


class TestFormatting:

    @pytest.mark.parametrize("format,expected", [
        ('full', 'Paush 16, 2077'),
        ('short', 'Pau 16, 2077'),
        ('numeric', '2077/09/16'),
        ('other', '2077/9/16'),
    ])
    def test_format_bs_date(self, format, expected):
        assert utils.format_bs_date(2077, 9, 16, format=format) == expected

    def test_format_with_month_name(self):
        assert utils.format_bs_date(2077, 'Mangh', 1) == 'Mangh 1, 2077'

    def test_format_invalid_date(self):
        with pytest.raises(InvalidDateError):
            utils.format_bs_date(2077, 9, 30)

    def test_get_nepali_month_name(self):
        assert utils.get_nepali_month_name(10) == 'Mangh'
        with pytest.raises(ValueError):
            utils.get_nepali_month_name(13)

    def test_is_valid_nepali_date(self):
        assert utils.is_valid_nepali_date(2076, 2, 32)
        assert not utils.is_valid_nepali_date(2076, 1, 32)
        assert not utils.is_valid_nepali_date(1969, 1, 1)


class TestSettings:

    def test_reads_django_settings(self):
        assert get_setting('CACHE_TIMEOUT') == 60

    def test_defaults(self):
        assert get_setting('CACHE_ENABLED') is True
        assert get_setting('CACHE_PREFIX') == 'bs'

    def test_unknown_setting(self):
        with pytest.raises(KeyError):
            get_setting('NOPE')
