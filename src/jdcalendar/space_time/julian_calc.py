"""Julian date calculation module.

This module converts between calendar dates and Julian dates using the
algorithms of Meeus, "Astronomical Algorithms" (2nd ed.), chapter 7.
Every INT() of the book is computed with integer floor division, so the
results stay exact for negative years.

Results are only meaningful for JD >= 0, which is 4713 BCE January 1 noon
in the proleptic Julian calendar. Dates before that are not rejected;
callers must keep their inputs inside the valid range.
"""

import math
from typing import Tuple

from .calendar import CalendarDate, CalendarSystem
from .floor_div import floor_div, floor_div64

# Integer part of jd + 0.5 at which jd_to_calendar switches to Gregorian
GREGORIAN_CUTOVER_Z = 2299161


def _march_based(year: int, month: int) -> Tuple[int, int]:
    # January and February count as months 13 and 14 of the previous year
    if month <= 2:
        return year - 1, month + 12
    return year, month


def _days_before(year: int, month: int) -> int:
    # INT(365.25 * (Y + 4716)) + INT(30.6001 * (M + 1)), eq. 7.1
    return floor_div64(36525 * (year + 4716), 100) + floor_div(306 * (month + 1), 10)


def calendar_gregorian_to_jd(year: int, month: int, day: float) -> float:
    """Convert a Gregorian calendar date to a Julian date.

    Negative years are valid, back to JD 0.

    Args:
        year: Astronomical year
        month: Month (1-12)
        day: Day of month, with the time of day as a fraction

    Returns:
        float: Julian date
    """
    year, month = _march_based(year, month)

    # Calculate A and B terms for the Gregorian calendar
    a = floor_div(year, 100)
    b = 2 - a + floor_div(a, 4)

    return float(_days_before(year, month) + b) + day - 1524.5


def calendar_julian_to_jd(year: int, month: int, day: float) -> float:
    """Convert a Julian calendar date to a Julian date.

    Negative years are valid, back to JD 0.

    Args:
        year: Astronomical year
        month: Month (1-12)
        day: Day of month, with the time of day as a fraction

    Returns:
        float: Julian date
    """
    year, month = _march_based(year, month)
    return float(_days_before(year, month)) + day - 1524.5


def calendar_to_jd(
    year: int,
    month: int,
    day: float,
    calendar: CalendarSystem = CalendarSystem.GREGORIAN,
) -> float:
    """Convert a date in the given calendar to a Julian date."""
    if calendar is CalendarSystem.JULIAN:
        return calendar_julian_to_jd(year, month, day)
    if calendar is CalendarSystem.GREGORIAN:
        return calendar_gregorian_to_jd(year, month, day)
    raise ValueError(f"Unknown calendar: {calendar!r}")


def _split(jd: float) -> Tuple[int, float]:
    # Z and F of Meeus: integer and fractional part of jd + 0.5
    fraction, whole = math.modf(jd + 0.5)
    return int(whole), fraction


def _gregorian_correction(z: int) -> int:
    alpha = floor_div64(z * 100 - 186721625, 3652425)
    return z + 1 + alpha - floor_div64(alpha, 4)


def _calendar_from_a(a: int, fraction: float) -> CalendarDate:
    b = a + 1524
    c = floor_div64(b * 100 - 12210, 36525)
    d = floor_div64(36525 * c, 100)
    e = floor_div64((b - d) * 10000, 306001)

    day = (b - d) - floor_div64(306001 * e, 10000) + fraction
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CalendarDate(year, month, day)


def jd_to_calendar(jd: float) -> CalendarDate:
    """Convert a Julian date to a calendar date.

    The result is in the Julian calendar before 1582-10-15 (Gregorian) and
    in the Gregorian calendar from then on. Use calendar_for_jd to find out
    which one applies.

    Args:
        jd: Julian date, not negative

    Returns:
        CalendarDate: Year, month and fractional day
    """
    z, fraction = _split(jd)
    a = _gregorian_correction(z) if z >= GREGORIAN_CUTOVER_Z else z
    return _calendar_from_a(a, fraction)


def jd_to_calendar_gregorian(jd: float) -> CalendarDate:
    """Convert a Julian date to a proleptic Gregorian calendar date.

    Dates before the 1582 reform are still given in the Gregorian calendar,
    which is what datetime expects.
    """
    z, fraction = _split(jd)
    return _calendar_from_a(_gregorian_correction(z), fraction)


def jd_to_calendar_julian(jd: float) -> CalendarDate:
    """Convert a Julian date to a proleptic Julian calendar date."""
    z, fraction = _split(jd)
    return _calendar_from_a(z, fraction)


def calendar_for_jd(jd: float) -> CalendarSystem:
    """The calendar jd_to_calendar reports this Julian date in."""
    z, _ = _split(jd)
    if z >= GREGORIAN_CUTOVER_Z:
        return CalendarSystem.GREGORIAN
    return CalendarSystem.JULIAN
