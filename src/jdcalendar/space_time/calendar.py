"""Calendar attributes: leap years, weekdays and day-of-year numbers.

Years use astronomical numbering: the year before 1 is 0, the year before
that is -1. Both calendars are extended proleptically in either direction.
"""

import math
from enum import Enum
from typing import NamedTuple, Tuple

from .floor_div import floor_div

# First Gregorian day, 1582-10-15 00:00 UTC (the day after 1582-10-04 Julian)
GREGORIAN_CUTOVER_JD = 2299160.5

# 2000-01-01 12:00 TT
J2000 = 2451545.0

# 1970-01-01 00:00 UTC
UNIX_EPOCH_JD = 2440587.5


class CalendarSystem(Enum):
    """The civil calendar a date is expressed in."""

    JULIAN = "julian"
    GREGORIAN = "gregorian"


class CalendarDate(NamedTuple):
    """A calendar date with the time of day as a fraction of the day.

    The calendar system is not part of the value; it is implied by the
    function that produced it.
    """

    year: int
    month: int
    day: float


def leap_year_julian(year: int) -> bool:
    """Return True if year is a leap year in the Julian calendar."""
    return year % 4 == 0


def leap_year_gregorian(year: int) -> bool:
    """Return True if year is a leap year in the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def leap_year(year: int, calendar: CalendarSystem) -> bool:
    """Return True if year is a leap year in the given calendar.

    Args:
        year: Astronomical year
        calendar: Calendar whose leap-year rule applies

    Returns:
        bool: Leap-year status
    """
    if calendar is CalendarSystem.JULIAN:
        return leap_year_julian(year)
    if calendar is CalendarSystem.GREGORIAN:
        return leap_year_gregorian(year)
    raise ValueError(f"Unknown calendar: {calendar!r}")


def day_of_week(jd: float) -> int:
    """Weekday of a Julian date.

    Args:
        jd: Julian date

    Returns:
        int: 0 for Sunday through 6 for Saturday
    """
    # JD changes at noon; the 1.5 offset moves the boundary to midnight
    return math.floor(jd + 1.5) % 7


def _whole_months(month: int, k: int) -> int:
    # Days in the months before `month`; k is 1 in leap years, 2 otherwise
    return floor_div(275 * month, 9) - k * floor_div(month + 9, 12) - 30


def _leap_k(leap: bool) -> int:
    return 1 if leap else 2


def month_length(month: int, leap: bool) -> int:
    """Number of days in a month (1-12), given the leap-year status."""
    if month == 12:
        return 31
    k = _leap_k(leap)
    return _whole_months(month + 1, k) - _whole_months(month, k)


def day_of_year(year: int, month: int, day: int, leap: bool) -> int:
    """Day number within the year, 1 for January 1.

    Not tied to either calendar; the caller supplies the leap-year status.

    Args:
        year: Year (unused by the formula)
        month: Month (1-12)
        day: Day of month
        leap: Whether year is a leap year

    Returns:
        int: Day of year in 1..365, or 1..366 in a leap year
    """
    return _whole_months(month, _leap_k(leap)) + day


def day_of_year_gregorian(year: int, month: int, day: int) -> int:
    """Day number within a Gregorian calendar year."""
    return day_of_year(year, month, day, leap_year_gregorian(year))


def day_of_year_julian(year: int, month: int, day: int) -> int:
    """Day number within a Julian calendar year."""
    return day_of_year(year, month, day, leap_year_julian(year))


def day_of_year_to_calendar(day_number: int, leap: bool) -> Tuple[int, int]:
    """Month and day of month for a day number within the year.

    Args:
        day_number: Day of year, 1 for January 1
        leap: Whether the year is a leap year

    Returns:
        Tuple[int, int]: Month and day of month
    """
    k = _leap_k(leap)
    if day_number < 32:
        month = 1
    else:
        month = floor_div(900 * (k + day_number) + 98 * 275, 27500)
    return month, day_number - _whole_months(month, k)
