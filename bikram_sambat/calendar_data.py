"""
Bikram Sambat calendar data (BS 1970-2100)

Each row is: day of Paush on which January 1st falls, followed by the
number of days in Baisakh ... Chaitra for that BS year.
"""
from collections import namedtuple
from typing import Optional


CalendarYearRecord = namedtuple('CalendarYearRecord', ['first_jan_offset', 'month_lengths'])

# Almanac data, not computable. Values must be kept exactly as published.
_RAW_CALENDAR_DATA = {
    1970: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1971: (18, 31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),
    1972: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    1973: (19, 30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1974: (19, 31, 31, 32, 30, 31, 31, 30, 29, 30, 29, 30, 30),
    1975: (18, 31, 31, 32, 32, 30, 31, 30, 29, 30, 29, 30, 30),
    1976: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1977: (18, 31, 32, 31, 32, 31, 31, 29, 30, 29, 30, 29, 31),
    1978: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1979: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1980: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1981: (18, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    1982: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1983: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1984: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1985: (18, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    1986: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1987: (18, 31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1988: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1989: (18, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    1990: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1991: (18, 31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),

    # Source: http://nepalicalendar.rat32.com/index.php
    1992: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1993: (18, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    1994: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1995: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    1996: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1997: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1998: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1999: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2000: (17, 30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2001: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2002: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2003: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2004: (17, 30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2005: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2006: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2007: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2008: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),
    2009: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2010: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2011: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2012: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2013: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2014: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2015: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2016: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2017: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2018: (18, 31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2019: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2020: (17, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2021: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2022: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2023: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2024: (17, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2025: (18, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2026: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2027: (17, 30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2028: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2029: (18, 31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),
    2030: (17, 31, 32, 31, 32, 31, 30, 30, 30, 30, 30, 30, 31),
    2031: (17, 31, 32, 31, 32, 31, 31, 31, 31, 31, 31, 31, 31),
    2032: (17, 32, 32, 32, 32, 32, 32, 32, 32, 32, 32, 32, 32),
    2033: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2034: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2035: (17, 30, 32, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),
    2036: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2037: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2038: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2039: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2040: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2041: (18, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2042: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2043: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2044: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2045: (18, 31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2046: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2047: (17, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2048: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2049: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2050: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2051: (17, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2052: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2053: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2054: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2055: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 30, 29, 30),
    2056: (17, 31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),
    2057: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2058: (17, 30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2059: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2060: (17, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2061: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2062: (17, 30, 32, 31, 32, 31, 31, 29, 30, 29, 30, 29, 31),
    2063: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2064: (17, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2065: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2066: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),
    2067: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2068: (17, 31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2069: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2070: (17, 31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2071: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2072: (17, 31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2073: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2074: (17, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2075: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2076: (16, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2077: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2078: (17, 31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2079: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2080: (16, 31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),

    # Source: http://www.ashesh.com.np/nepali-calendar/
    2081: (17, 31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2082: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2083: (17, 31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2084: (17, 31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2085: (17, 31, 32, 31, 32, 31, 31, 30, 30, 29, 30, 30, 30),
    2086: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2087: (16, 31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30),
    2088: (16, 30, 31, 32, 32, 30, 31, 30, 30, 29, 30, 30, 30),
    2089: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2090: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2091: (16, 31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30),
    2092: (16, 31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2093: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2094: (17, 31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2095: (17, 31, 31, 32, 31, 31, 31, 30, 29, 30, 30, 30, 30),
    2096: (17, 30, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2097: (17, 31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2098: (17, 31, 31, 32, 31, 31, 31, 29, 30, 29, 30, 30, 31),
    2099: (17, 31, 31, 32, 31, 31, 31, 30, 29, 29, 30, 30, 30),
    2100: (17, 31, 32, 31, 32, 30, 31, 30, 29, 30, 29, 30, 30),
}

CALENDAR_DATA = {
    year: CalendarYearRecord(row[0], tuple(row[1:]))
    for year, row in _RAW_CALENDAR_DATA.items()
}

MIN_YEAR = min(CALENDAR_DATA)
MAX_YEAR = max(CALENDAR_DATA)

NEPALI_MONTHS = (
    'Baisakh', 'Jestha', 'Ashadh', 'Shrawan', 'Bhadra', 'Ashwin',
    'Kartik', 'Mangsir', 'Paush', 'Mangh', 'Falgun', 'Chaitra',
)

# January 1st always falls in Paush
PAUSH = 9


def lookup(bs_year: int) -> Optional[CalendarYearRecord]:
    """Return the calendar record for a BS year, or None if unsupported"""
    return CALENDAR_DATA.get(bs_year)


def is_supported_year(bs_year: int) -> bool:
    return bs_year in CALENDAR_DATA


def days_in_month(bs_year: int, month: int) -> int:
    """
    Number of days in a BS month

    Raises:
        KeyError: If the year is not in the table
        IndexError: If month is not between 1 and 12
    """
    if not 1 <= month <= 12:
        raise IndexError(f"Invalid month: {month}")
    return CALENDAR_DATA[bs_year].month_lengths[month - 1]


def days_in_year(bs_year: int) -> int:
    return sum(CALENDAR_DATA[bs_year].month_lengths)
