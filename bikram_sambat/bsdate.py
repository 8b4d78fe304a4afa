"""
Bikram Sambat (BS) date type and BS <-> Gregorian (AD) conversion

Conversion works by offsets from January 1st: every BS year record knows
on which day of Paush (month 9) January 1st of AD year ``bs_year - 56``
falls, so a date is converted by counting the days between it and that
January 1st.
"""
import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

from .calendar_data import NEPALI_MONTHS, PAUSH, lookup
from .exceptions import InvalidDateError, MissingCalendarDataError, UnsupportedMonthTypeError

logger = logging.getLogger(__name__)

# AD year = BS year - 56 from January 1st until the end of the BS year
BS_AD_YEAR_DIFFERENCE = 56


def _record_or_raise(bs_year: int):
    record = lookup(bs_year)
    if record is None:
        logger.debug("No calendar data for BS year %s", bs_year)
        raise MissingCalendarDataError(bs_year)
    return record


@dataclass(frozen=True, order=True)
class BSDate:
    """
    A validated Bikram Sambat date.

    Instances are immutable and can only hold dates present in the
    calendar table. Use ``new`` to build one from a month number or
    month name, or ``new_from_gregorian`` to convert an AD date.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        if not _is_valid(self.year, self.month, self.day):
            raise InvalidDateError(self.year, self.month, self.day)

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def month_name(self) -> str:
        return NEPALI_MONTHS[self.month - 1]

    @classmethod
    def from_gregorian(cls, value: Union[date, datetime]) -> 'BSDate':
        """Build a BSDate from a ``date`` or ``datetime`` (time part is ignored)"""
        if isinstance(value, datetime):
            value = value.date()
        return _from_gregorian_date(value)

    def to_gregorian(self) -> date:
        """
        Convert this date to the Gregorian calendar.

        Returns:
            datetime.date of the same day

        Raises:
            MissingCalendarDataError: If the conversion needs the record of
                the previous BS year and the table does not have it
        """
        record = lookup(self.year)

        # Before January 1st the AD year is one lower
        if self.month > PAUSH or (self.month == PAUSH and self.day >= record.first_jan_offset):
            gregorian_year = self.year - BS_AD_YEAR_DIFFERENCE
        else:
            gregorian_year = self.year - BS_AD_YEAR_DIFFERENCE - 1

        days_since_jan_first = 0
        bs_year = self.year
        month = self.month

        if self.month != PAUSH:
            days_since_jan_first = self.day
            month -= 1

        # Count the full months back to Paush
        while month != PAUSH:
            if month <= 0:
                month = 12
                bs_year -= 1
                record = _record_or_raise(bs_year)
            days_since_jan_first += record.month_lengths[month - 1]
            month -= 1

        if self.month == PAUSH:
            days_since_jan_first += self.day - record.first_jan_offset
            # Early Paush is still in the previous AD year
            if days_since_jan_first < 0:
                days_since_jan_first += 366 if calendar.isleap(gregorian_year) else 365
        else:
            # Part of Paush that lies after January 1st
            days_since_jan_first += record.month_lengths[PAUSH - 1] - record.first_jan_offset

        return date(gregorian_year, 1, 1) + timedelta(days=days_since_jan_first)


def _is_valid(year, month, day) -> bool:
    if not all(isinstance(value, int) and not isinstance(value, bool) for value in (year, month, day)):
        return False
    record = lookup(year)
    if record is None:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= record.month_lengths[month - 1]


def _resolve_month(month) -> int:
    """Turn a month number or exact month name into a month number (0 if unknown)"""
    if isinstance(month, bool):
        raise UnsupportedMonthTypeError(month)
    if isinstance(month, str):
        try:
            return NEPALI_MONTHS.index(month) + 1
        except ValueError:
            return 0
    if isinstance(month, int):
        return month
    raise UnsupportedMonthTypeError(month)


def new(day: int, month: Union[int, str], year: int) -> BSDate:
    """
    Create a validated BS date.

    Args:
        day: Day of month (1-32, depending on year and month)
        month: Month number 1-12 or exact, case-sensitive month name
            such as 'Baisakh'
        year: BS year, must be covered by the calendar table

    Returns:
        BSDate

    Raises:
        UnsupportedMonthTypeError: If month is neither an int nor a str
        InvalidDateError: If the date does not exist in the calendar
    """
    return BSDate(year, _resolve_month(month), day)


def new_from_gregorian(gregorian_day: int, gregorian_month: int, gregorian_year: int) -> BSDate:
    """
    Create a BS date from a Gregorian day, month and year.

    Raises:
        InvalidDateError: If the Gregorian date itself does not exist
        MissingCalendarDataError: If the BS years needed are not in the table
    """
    try:
        gregorian_date = date(gregorian_year, gregorian_month, gregorian_day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(gregorian_year, gregorian_month, gregorian_day) from e
    return _from_gregorian_date(gregorian_date)


def _from_gregorian_date(gregorian_date: date) -> BSDate:
    bs_year = gregorian_date.year + BS_AD_YEAR_DIFFERENCE
    bs_month = PAUSH
    record = _record_or_raise(bs_year)

    day_of_year = gregorian_date.timetuple().tm_yday

    # Days from January 1st through the last day of the current BS month
    days_to_month_end = record.month_lengths[PAUSH - 1] - record.first_jan_offset + 1

    while day_of_year > days_to_month_end:
        bs_month += 1
        if bs_month > 12:
            bs_month = 1
            bs_year += 1
            record = _record_or_raise(bs_year)
        days_to_month_end += record.month_lengths[bs_month - 1]

    bs_day = record.month_lengths[bs_month - 1] - (days_to_month_end - day_of_year)
    return new(bs_day, bs_month, bs_year)
