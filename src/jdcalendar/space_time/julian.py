"""Conversions between Julian dates and datetime objects.

datetime always uses the proleptic Gregorian calendar, so dates are
converted with the Gregorian-only functions of julian_calc regardless of
the 1582 reform.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

import pytz

from ..logging import get_logger
from .calendar import CalendarDate
from .julian_calc import calendar_gregorian_to_jd, jd_to_calendar_gregorian
from .pythonic_datetimes import ensure_utc, get_utc_datetime
from .rounding import round_to_nearest_millisecond

logger = get_logger(__name__)

JD_PRECISION = 9

MIN_DATETIME_YEAR = datetime.min.year
MAX_DATETIME_YEAR = datetime.max.year


class TimestampRangeError(ValueError):
    """Raised when a Julian date has no datetime representation."""

    pass


def _day_fraction(hour: int, minute: int, second: int, microsecond: int) -> float:
    """Calculate the fraction of a day from time components.

    Args:
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        Fraction of day (0.0 to 0.99999...)
    """
    total_seconds = hour * 3600 + minute * 60 + second + microsecond / 1_000_000
    return total_seconds / 86400


def datetime_to_calendar(dt: datetime) -> CalendarDate:
    """Split a datetime into UTC year, month and fractional day of month.

    Args:
        dt: Datetime to split; naive values are taken as UTC

    Returns:
        CalendarDate: Gregorian year, month and day with time of day as fraction
    """
    dt = ensure_utc(dt)
    day = dt.day + _day_fraction(dt.hour, dt.minute, dt.second, dt.microsecond)
    return CalendarDate(dt.year, dt.month, day)


def julian_from_datetime(dt: datetime) -> float:
    """Convert datetime to Julian date.

    Any timezone offset is normalized away; the instant is read in UTC.

    Args:
        dt: Datetime to convert

    Returns:
        float: Julian date
    """
    return calendar_gregorian_to_jd(*datetime_to_calendar(dt))


def julian_to_datetime(jd: float) -> datetime:
    """Convert Julian date to datetime.

    The result is rounded to the nearest millisecond, about the resolution
    a float JD carries for present-day dates.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: UTC datetime

    Raises:
        TimestampRangeError: If the date falls outside datetime's years
    """
    year, month, day = jd_to_calendar_gregorian(jd)
    if not MIN_DATETIME_YEAR <= year <= MAX_DATETIME_YEAR:
        raise TimestampRangeError(
            f"JD {jd} is in year {year}, outside {MIN_DATETIME_YEAR}..{MAX_DATETIME_YEAR}"
        )
    try:
        dt = get_utc_datetime(year, month, 1) + timedelta(days=day - 1)
        return round_to_nearest_millisecond(dt)
    except OverflowError as e:
        raise TimestampRangeError(f"JD {jd} is past the last datetime") from e


# Aliases
datetime_to_julian = julian_from_datetime
datetime_from_julian = julian_to_datetime


def julian_to_julian_parts(jd: float) -> Tuple[int, float]:
    """Split Julian date into integer and fractional parts.

    Args:
        jd: Julian date to split

    Returns:
        Tuple[int, float]: Integer and fractional parts
    """
    jd_int = int(jd)
    jd_frac = round(jd - jd_int, JD_PRECISION)
    return jd_int, jd_frac


def datetime_to_julian_parts(dt: datetime) -> Tuple[int, float]:
    """Get integer and fractional parts of Julian date.

    Args:
        dt: Datetime to convert

    Returns:
        Tuple[int, float]: Integer and fractional parts
    """
    return julian_to_julian_parts(julian_from_datetime(dt))


def _utc_now() -> datetime:
    return datetime.now(pytz.UTC)


def julian_now(clock: Optional[Callable[[], datetime]] = None) -> float:
    """Julian date of the current moment.

    Args:
        clock: Callable returning the current datetime. Defaults to the
            system clock in UTC.

    Returns:
        float: Julian date
    """
    now = (clock or _utc_now)()
    logger.debug(f"Clock read {now.isoformat()}")
    return julian_from_datetime(now)
