"""ZDA sentence decoder.

ZDA (Time and Date):
    $GPZDA,110003.00,27,03,2006,-5,00*7F
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours (signed)
           |         |  |  +-- Year (4 digits)
           |         |  +-- Month
           |         +-- Day
           +-- UTC time (HHMMSS.ss)

A zero (or omitted) local zone yields a UTC timestamp. A non-zero zone yields
a timestamp tagged with that fixed offset. The time itself is left as
transmitted and is not converted to UTC.

When the day, month and year fields are all empty the date is the zero date.
A partially filled date names no calendar day and fails to decode.
"""

from datetime import date, datetime, timedelta, timezone

from nmeadecode.nmea.errors import FieldDecodeError
from nmeadecode.nmea.fields import ZERO_DATE, parse_int_field, parse_time_field
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import ZDAData


def _parse_date(day: str, month: str, year: str) -> date:
    if not (day or month or year):
        return ZERO_DATE
    try:
        return date(parse_int_field(year), parse_int_field(month), parse_int_field(day))
    except (ValueError, OverflowError) as exc:
        raise FieldDecodeError(f"invalid date: {exc}", f"{day},{month},{year}") from exc


def _parse_zone(hours: str, minutes: str) -> timezone:
    """Build the fixed zone for the local zone fields.

    The sign of the hours field applies to the minutes as well, so
    ``-0,30`` is half an hour west of UTC.
    """
    offset_minutes = abs(parse_int_field(hours)) * 60 + parse_int_field(minutes)
    if hours.startswith("-"):
        offset_minutes = -offset_minutes
    if offset_minutes == 0:
        return timezone.utc
    try:
        return timezone(timedelta(minutes=offset_minutes))
    except (ValueError, OverflowError) as exc:
        raise FieldDecodeError(f"invalid zone offset: {exc}", f"{hours},{minutes}") from exc


def decode_zda(sentence: RawSentence) -> ZDAData:
    """Construct a ZDAData object from tokenized fields."""
    fields = sentence.field
    day = _parse_date(fields(1), fields(2), fields(3))
    time_of_day = parse_time_field(fields(0))
    zone = _parse_zone(fields(4), fields(5))
    return ZDAData(
        timestamp=datetime.combine(day, time_of_day.replace(tzinfo=zone)),
    )


def parse_zda(sentence: str) -> ZDAData | None:
    """Parse a ZDA sentence, returning None if it is invalid.

    Example:
        >>> parse_zda("$GPZDA,162254.00,11,07,2006,00,00*63").timestamp
        datetime.datetime(2006, 7, 11, 16, 22, 54, tzinfo=datetime.timezone.utc)
    """
    return parse_sentence_as(sentence, ZDAData.sentence_type, decode_zda)
