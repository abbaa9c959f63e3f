"""Decoder for Navitia date-time strings."""

from datetime import datetime, timedelta


def decode_navitia_datetime(value: str | None) -> datetime:
    """Decode a Navitia timestamp (YYYYMMDDTHHMMSS) into a naive local datetime.

    Seconds are ignored. Navitia already returns local wall-clock time, so no
    timezone is attached. Decoding never raises: a missing, short or
    unparseable value falls back to the current time.

    Out-of-range fields are rolled over rather than rejected, so month 13 is
    January of the following year and day 32 spills into the next month.

    Args:
        value: Timestamp such as "20240115T143000".

    Returns:
        Decoded datetime, or datetime.now() when the value cannot be decoded.
    """
    if not value or len(value) < 13:
        return datetime.now()

    try:
        year = int(value[0:4])
        month = int(value[4:6])
        day = int(value[6:8])
        hour = int(value[9:11])
        minute = int(value[11:13])
    except ValueError:
        return datetime.now()

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        first_of_month = datetime(year, month, 1)
    except ValueError:
        # Year outside datetime's range
        return datetime.now()

    try:
        return first_of_month + timedelta(days=day - 1, hours=hour, minutes=minute)
    except OverflowError:
        # Rollover past year 9999
        return datetime.now()
