"""
Bikram Sambat - Nepali (BS) <-> Gregorian (AD) date conversion for Nepal
"""

__version__ = '1.0.0'

from .bsdate import BSDate, new, new_from_gregorian
from .calendar_data import MAX_YEAR, MIN_YEAR, NEPALI_MONTHS
from .exceptions import (
    BSDateError,
    InvalidDateError,
    MissingCalendarDataError,
    UnsupportedMonthTypeError,
)
from .utils import (
    bs_to_ad,
    ad_to_bs,
    get_fiscal_year,
    get_fiscal_year_dates,
    is_valid_nepali_date,
    format_bs_date,
    get_nepali_month_name,
    get_current_fiscal_year,
)

__all__ = [
    'BSDate',
    'new',
    'new_from_gregorian',
    'BSDateError',
    'InvalidDateError',
    'MissingCalendarDataError',
    'UnsupportedMonthTypeError',
    'bs_to_ad',
    'ad_to_bs',
    'get_fiscal_year',
    'get_fiscal_year_dates',
    'is_valid_nepali_date',
    'format_bs_date',
    'get_nepali_month_name',
    'get_current_fiscal_year',
    'NEPALI_MONTHS',
    'MIN_YEAR',
    'MAX_YEAR',
]
