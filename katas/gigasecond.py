"""Add a gigasecond to a moment in time."""

from datetime import datetime, timedelta

GIGASECOND = timedelta(seconds=1_000_000_000)


def after(start: datetime) -> datetime:
    """The moment one billion seconds after ``start``, capped at the maximum datetime."""
    try:
        return start + GIGASECOND
    except OverflowError:
        return datetime.max.replace(tzinfo=start.tzinfo)