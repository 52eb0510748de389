"""
Command-line interface utilities for jdcalendar.

This module handles logging configuration and the parsing of date inputs
shared by the conversion commands.
"""

import logging
import math
from typing import Any, Dict

import click
import dateutil.parser

from ..logging import set_log_level
from ..space_time.julian import julian_from_datetime, julian_now


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags: quiet, debug and verbose
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("jdcalendar").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_jd_input(value: str) -> float:
    """Parse a Julian date given in various formats.

    Args:
        value: One of:
            - Julian date (e.g., "2460385.333333333")
            - ISO 8601 timestamp, naive ones taken as UTC
              (e.g., "2024-03-15T20:00:00+00:00")
            - "now"

    Returns:
        Julian date as float

    Raises:
        ValueError: If the string is none of the above
    """
    if value.strip().lower() == "now":
        return julian_now()

    try:
        jd = float(value.strip("' "))
    except ValueError:
        pass
    else:
        # nan and inf parse as floats but name no date
        if not math.isfinite(jd):
            raise ValueError(f"Invalid date format: {value}")
        return jd

    try:
        return julian_from_datetime(dateutil.parser.isoparse(value.strip()))
    except ValueError:
        raise ValueError(f"Invalid date format: {value}")


class JulianDateParamType(click.ParamType):
    """Click parameter accepting anything parse_jd_input accepts."""

    name = "jd"

    def convert(self, value, param, ctx):
        if isinstance(value, float):
            return value
        try:
            return parse_jd_input(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


JULIAN_DATE = JulianDateParamType()
