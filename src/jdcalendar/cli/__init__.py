"""CLI entry point for jdcalendar."""

import click

from . import common as common
from .convert import (
    day_of_year_command,
    from_datetime,
    from_day_of_year,
    from_jd,
    now,
    to_datetime,
    to_jd,
    weekday,
)
from ..logging import get_logger

logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Convert between calendar dates and Julian dates."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(to_jd)
cli.add_command(from_jd)
cli.add_command(weekday)
cli.add_command(day_of_year_command)
cli.add_command(from_day_of_year)
cli.add_command(from_datetime)
cli.add_command(to_datetime)
cli.add_command(now)

if __name__ == "__main__":
    cli()
