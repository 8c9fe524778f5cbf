from datetime import date, datetime, time, timedelta

from utils.constants import DISPLAY_DATE_FORMAT


def as_date(value: date | datetime) -> date:
    """Reduce a datetime to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def as_datetime(value: date | datetime) -> datetime:
    """A date becomes midnight of that day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def window_start(reference: date | datetime, window: timedelta) -> datetime:
    """Exclusive lower bound of a look-back window ending at ``reference``."""
    return as_datetime(reference) - window


def format_display_date(d: date) -> str:
    """Day/month/year without zero padding, e.g. '15/9/2024'."""
    return DISPLAY_DATE_FORMAT.format(d=d)
