from .floor_div import floor_div, floor_div64
from .calendar import (
    GREGORIAN_CUTOVER_JD,
    J2000,
    UNIX_EPOCH_JD,
    CalendarDate,
    CalendarSystem,
    day_of_week,
    day_of_year,
    day_of_year_gregorian,
    day_of_year_julian,
    day_of_year_to_calendar,
    leap_year,
    leap_year_gregorian,
    leap_year_julian,
    month_length,
)
from .julian_calc import (
    calendar_for_jd,
    calendar_gregorian_to_jd,
    calendar_julian_to_jd,
    calendar_to_jd,
    jd_to_calendar,
    jd_to_calendar_gregorian,
    jd_to_calendar_julian,
)
from .julian import (
    TimestampRangeError,
    datetime_from_julian,
    datetime_to_calendar,
    datetime_to_julian,
    datetime_to_julian_parts,
    julian_from_datetime,
    julian_now,
    julian_to_datetime,
    julian_to_julian_parts,
)

__all__ = [
    "floor_div",
    "floor_div64",
    "GREGORIAN_CUTOVER_JD",
    "J2000",
    "UNIX_EPOCH_JD",
    "CalendarDate",
    "CalendarSystem",
    "day_of_week",
    "day_of_year",
    "day_of_year_gregorian",
    "day_of_year_julian",
    "day_of_year_to_calendar",
    "leap_year",
    "leap_year_gregorian",
    "leap_year_julian",
    "month_length",
    "calendar_for_jd",
    "calendar_gregorian_to_jd",
    "calendar_julian_to_jd",
    "calendar_to_jd",
    "jd_to_calendar",
    "jd_to_calendar_gregorian",
    "jd_to_calendar_julian",
    "TimestampRangeError",
    "datetime_from_julian",
    "datetime_to_calendar",
    "datetime_to_julian",
    "datetime_to_julian_parts",
    "julian_from_datetime",
    "julian_now",
    "julian_to_datetime",
    "julian_to_julian_parts",
]
