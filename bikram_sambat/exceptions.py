"""
Exceptions raised by the Bikram Sambat conversion engine

Hierarchy:
    BSDateError
    ├── UnsupportedMonthTypeError   month is neither an int nor a str
    ├── InvalidDateError            day/month/year is not a valid date
    └── MissingCalendarDataError    conversion needs a year outside the table
"""


class BSDateError(Exception):
    """Base class for every error raised by bikram_sambat"""


class UnsupportedMonthTypeError(BSDateError, TypeError):
    """The month was passed as something other than an int or a month name"""

    def __init__(self, month):
        self.month = month
        super().__init__("month has to be of value int or string")


class InvalidDateError(BSDateError, ValueError):
    """The day/month/year combination does not exist in the calendar"""

    def __init__(self, year=None, month=None, day=None):
        self.year = year
        self.month = month
        self.day = day
        super().__init__("not a valid date")


class MissingCalendarDataError(BSDateError):
    """
    A valid date could not be converted because the conversion needs
    calendar data for a BS year the table does not cover.
    """

    def __init__(self, bs_year=None):
        self.bs_year = bs_year
        super().__init__("cannot convert date, missing data")
