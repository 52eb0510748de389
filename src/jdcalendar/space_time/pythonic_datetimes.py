from datetime import datetime
import pytz


def ensure_utc(dt: datetime) -> datetime:
    """Normalize a datetime to UTC.

    Naive datetimes are taken to be UTC already. Aware datetimes are
    converted, so the offset only moves the instant onto the UTC clock.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: Aware UTC datetime
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=pytz.UTC)
    return dt.astimezone(pytz.UTC)


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )
