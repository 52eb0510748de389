"""CLI commands for converting between calendar dates and Julian dates."""

import click
import dateutil.parser

from ..logging import get_logger
from ..space_time.calendar import (
    CalendarSystem,
    day_of_week,
    day_of_year,
    day_of_year_to_calendar,
    leap_year,
    month_length,
)
from ..space_time.julian import (
    TimestampRangeError,
    julian_from_datetime,
    julian_now,
    julian_to_datetime,
)
from ..space_time.julian_calc import (
    calendar_for_jd,
    calendar_to_jd,
    jd_to_calendar,
    jd_to_calendar_gregorian,
    jd_to_calendar_julian,
)
from .common import JULIAN_DATE

logger = get_logger(__name__)

CALENDAR_CHOICES = [c.value for c in CalendarSystem]

# Negative years look like options to click
NEGATIVE_NUMBERS = {"ignore_unknown_options": True}


def _calendar_option(default: str = CalendarSystem.GREGORIAN.value):
    return click.option(
        "--calendar",
        "-c",
        type=click.Choice(CALENDAR_CHOICES),
        default=default,
        show_default=True,
        help="Calendar the date is expressed in",
    )


@click.command("to-jd", context_settings=NEGATIVE_NUMBERS)
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.argument("day", type=click.FloatRange(min=0))
@_calendar_option()
def to_jd(year: int, month: int, day: float, calendar: str) -> None:
    """Julian date of YEAR MONTH DAY (day may carry a fraction)."""
    jd = calendar_to_jd(year, month, day, CalendarSystem(calendar))
    logger.debug(f"{calendar} {year}-{month}-{day} -> JD {jd}")
    click.echo(f"{jd:.6f}")


@click.command("from-jd")
@click.argument("jd", type=JULIAN_DATE)
@click.option(
    "--calendar",
    "-c",
    type=click.Choice(["auto"] + CALENDAR_CHOICES),
    default="auto",
    show_default=True,
    help="Calendar for the result; auto switches at the 1582 reform",
)
def from_jd(jd: float, calendar: str) -> None:
    """Calendar date of a Julian date."""
    if calendar == "auto":
        date = jd_to_calendar(jd)
        system = calendar_for_jd(jd)
    elif calendar == CalendarSystem.GREGORIAN.value:
        date = jd_to_calendar_gregorian(jd)
        system = CalendarSystem.GREGORIAN
    else:
        date = jd_to_calendar_julian(jd)
        system = CalendarSystem.JULIAN
    logger.debug(f"JD {jd} -> {system.value} {date}")
    click.echo(f"{date.year} {date.month} {date.day:.6f} {system.value}")


@click.command()
@click.argument("jd", type=JULIAN_DATE)
def weekday(jd: float) -> None:
    """Weekday of a Julian date, 0 for Sunday."""
    click.echo(day_of_week(jd))


@click.command("day-of-year", context_settings=NEGATIVE_NUMBERS)
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.argument("day", type=click.IntRange(1, 31))
@_calendar_option()
def day_of_year_command(year: int, month: int, day: int, calendar: str) -> None:
    """Day number of YEAR MONTH DAY within its year."""
    leap = leap_year(year, CalendarSystem(calendar))
    if day > month_length(month, leap):
        raise click.BadParameter(
            f"{year}-{month} has only {month_length(month, leap)} days", param_hint="DAY"
        )
    click.echo(day_of_year(year, month, day, leap))


@click.command("from-day-of-year", context_settings=NEGATIVE_NUMBERS)
@click.argument("year", type=int)
@click.argument("number", type=click.IntRange(1, 366))
@_calendar_option()
def from_day_of_year(year: int, number: int, calendar: str) -> None:
    """Month and day of the NUMBERth day of YEAR."""
    leap = leap_year(year, CalendarSystem(calendar))
    if number == 366 and not leap:
        raise click.BadParameter(f"{year} has only 365 days", param_hint="NUMBER")
    month, day = day_of_year_to_calendar(number, leap)
    click.echo(f"{month} {day}")


@click.command("from-datetime")
@click.argument("timestamp")
def from_datetime(timestamp: str) -> None:
    """Julian date of an ISO 8601 TIMESTAMP (naive values are UTC)."""
    try:
        dt = dateutil.parser.isoparse(timestamp)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="TIMESTAMP")
    click.echo(f"{julian_from_datetime(dt):.6f}")


@click.command("to-datetime")
@click.argument("jd", type=JULIAN_DATE)
def to_datetime(jd: float) -> None:
    """UTC timestamp of a Julian date."""
    try:
        dt = julian_to_datetime(jd)
    except TimestampRangeError as e:
        raise click.ClickException(str(e))
    click.echo(dt.isoformat())


@click.command()
def now() -> None:
    """Julian date of the current moment."""
    click.echo(f"{julian_now():.6f}")
