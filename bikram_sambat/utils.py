"""
Utility functions for Nepali-English date conversion and fiscal year operations
"""
import logging
from datetime import date, datetime
from typing import Dict, Tuple, Union

from django.core.cache import cache

from .bsdate import BSDate, new
from .calendar_data import MAX_YEAR, MIN_YEAR, NEPALI_MONTHS, days_in_month, is_supported_year
from .conf import get_setting
from .exceptions import InvalidDateError

logger = logging.getLogger(__name__)

# Nepal's fiscal year starts on Shrawan 1 and ends on the last day of Ashadh
FISCAL_YEAR_START_MONTH = 4
FISCAL_YEAR_END_MONTH = 3


def _cache_key(*parts) -> str:
    return '_'.join([get_setting('CACHE_PREFIX')] + [str(p) for p in parts])


def _cache_get(key):
    if not get_setting('CACHE_ENABLED'):
        return None
    value = cache.get(key)
    logger.debug("Cache %s for %s", 'hit' if value is not None else 'miss', key)
    return value


def _cache_set(key, value):
    if get_setting('CACHE_ENABLED'):
        cache.set(key, value, get_setting('CACHE_TIMEOUT'))


def get_nepali_month_name(month: int) -> str:
    """Get Nepali month name from month number (1-12)"""
    if 1 <= month <= 12:
        return NEPALI_MONTHS[month - 1]
    raise ValueError(f"Invalid month: {month}")


def is_valid_nepali_date(year: int, month: int, day: int) -> bool:
    """Validate if a Nepali date is valid"""
    try:
        BSDate(year, month, day)
    except InvalidDateError:
        return False
    return True


def bs_to_ad(year: int, month: int, day: int) -> date:
    """
    Convert Bikram Sambat (BS) date to Anno Domini (AD) date

    Args:
        year: BS year
        month: BS month (1-12)
        day: BS day

    Returns:
        date object representing the AD date

    Raises:
        InvalidDateError: If date is invalid or year not supported
        MissingCalendarDataError: If the previous BS year is needed but not available
    """
    cache_key = _cache_key('bs_to_ad', year, month, day)
    cached_result = _cache_get(cache_key)
    if cached_result is not None:
        return cached_result

    try:
        bs_date = BSDate(year, month, day)
    except InvalidDateError:
        logger.debug(
            "Invalid Nepali date %s/%s/%s, supported years: %s-%s",
            year, month, day, MIN_YEAR, MAX_YEAR,
        )
        raise

    result_date = bs_date.to_gregorian()
    _cache_set(cache_key, result_date)
    return result_date


def ad_to_bs(ad_date: Union[date, datetime, str]) -> Dict[str, Union[int, str]]:
    """
    Convert Anno Domini (AD) date to Bikram Sambat (BS) date

    Args:
        ad_date: datetime object, date object or 'YYYY-MM-DD' string

    Returns:
        Dictionary with keys: year, month, day, month_name

    Raises:
        InvalidDateError: If a string is given that is not a valid 'YYYY-MM-DD' date
        MissingCalendarDataError: If the date is outside the supported range
    """
    if isinstance(ad_date, str):
        try:
            ad_date = datetime.strptime(ad_date, '%Y-%m-%d')
        except ValueError as e:
            raise InvalidDateError() from e
    if isinstance(ad_date, datetime):
        ad_date = ad_date.date()

    cache_key = _cache_key('ad_to_bs', ad_date.isoformat())
    cached_result = _cache_get(cache_key)
    if cached_result is not None:
        return cached_result

    bs_date = BSDate.from_gregorian(ad_date)
    result = {
        'year': bs_date.year,
        'month': bs_date.month,
        'day': bs_date.day,
        'month_name': bs_date.month_name,
    }
    _cache_set(cache_key, result)
    return result


def get_fiscal_year(value, format='string'):
    """
    Get fiscal year for a given date
    Nepal fiscal year: Shrawan 1 to Ashadh end (approximately July to July)

    Args:
        value: BSDate, dict with year and month (BS), or AD date/datetime
        format: 'string' returns "2080/81", 'dict' returns {'start_year': 2080, 'end_year': 2081}

    Returns:
        Fiscal year string or dict
    """
    if isinstance(value, BSDate):
        bs_year, bs_month = value.year, value.month
    elif isinstance(value, dict) and 'year' in value and 'month' in value:
        bs_year, bs_month = value['year'], value['month']
    else:
        bs_date = ad_to_bs(value)
        bs_year, bs_month = bs_date['year'], bs_date['month']

    if bs_month >= FISCAL_YEAR_START_MONTH:
        start_year = bs_year
    else:
        start_year = bs_year - 1
    end_year = start_year + 1

    if format == 'dict':
        return {'start_year': start_year, 'end_year': end_year}
    return f"{start_year}/{str(end_year)[-2:]}"


def get_fiscal_year_dates(fiscal_year_string: str) -> Tuple[date, date]:
    """
    Get start and end dates for a fiscal year

    Args:
        fiscal_year_string: String like "2080/81"

    Returns:
        Tuple of (start_date, end_date) as AD date objects

    Raises:
        ValueError: If the string is not in the "YYYY/YY" form
        InvalidDateError: If the fiscal year is outside the calendar table
        MissingCalendarDataError: If Shrawan 1 of the start year needs the
            previous BS year and the table does not have it (e.g. "1970/71")
    """
    try:
        start_year = int(fiscal_year_string.split('/')[0])
    except ValueError as e:
        raise ValueError(f"Invalid fiscal year: {fiscal_year_string!r}") from e
    end_year = start_year + 1

    start_date = bs_to_ad(start_year, FISCAL_YEAR_START_MONTH, 1)

    if not is_supported_year(end_year):
        raise InvalidDateError(end_year, FISCAL_YEAR_END_MONTH)
    ashadh_days = days_in_month(end_year, FISCAL_YEAR_END_MONTH)
    end_date = bs_to_ad(end_year, FISCAL_YEAR_END_MONTH, ashadh_days)

    return start_date, end_date


def format_bs_date(year: int, month: Union[int, str], day: int, format='full') -> str:
    """
    Format BS date in different styles

    Args:
        year, month, day: BS date components
        format: 'full', 'short', 'numeric'

    Returns:
        Formatted date string
    """
    bs_date = new(day, month, year)
    month_name = bs_date.month_name

    if format == 'full':
        return f"{month_name} {bs_date.day}, {bs_date.year}"
    elif format == 'short':
        return f"{month_name[:3]} {bs_date.day}, {bs_date.year}"
    elif format == 'numeric':
        return f"{bs_date.year}/{bs_date.month:02d}/{bs_date.day:02d}"
    else:
        return f"{bs_date.year}/{bs_date.month}/{bs_date.day}"


def get_current_fiscal_year() -> str:
    """Get current fiscal year based on today's date"""
    from django.utils import timezone
    now = timezone.now()
    # Fiscal years turn over at midnight in TIME_ZONE, not UTC
    today = timezone.localdate(now) if timezone.is_aware(now) else now.date()
    return get_fiscal_year(today)
