"""Julian day conversions for the Julian and Gregorian calendars."""

from .space_time import *  # noqa: F401,F403
from .space_time import __all__
