from datetime import datetime, timedelta


def round_to_nearest_millisecond(dt: datetime) -> datetime:
    """Round microseconds to the nearest millisecond, carrying into seconds.

    Exactly half a millisecond rounds up.
    """
    rounded_micros = (dt.microsecond + 500) // 1000 * 1000

    # 999.5 ms and up rolls over into the next second
    extra_seconds = rounded_micros // 1_000_000
    dt = dt.replace(microsecond=rounded_micros % 1_000_000)
    if extra_seconds:
        dt += timedelta(seconds=extra_seconds)
    return dt
