"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Devices routinely omit a field when a measurement is not
available, so an empty field is never an error: it decodes to a zero/default
value. A field that is present but does not match its grammar, such as text
in a numeric slot, is a hard failure for the sentence it belongs to.

Each ``decode_*`` function returns a ``FieldResult`` tagged with how the value
was obtained, so the empty-versus-malformed policy can be checked per field.
The ``parse_*`` helpers unwrap that result for sentence decoders, raising
``FieldDecodeError`` on malformed input.
"""

import enum
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Generic, TypeVar

from nmeadecode.nmea.errors import FieldDecodeError

T = TypeVar("T")

# Decimal numbers as NMEA devices emit them. float() alone would also accept
# "nan", "inf", "1_000" and surrounding whitespace.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d*))?", re.ASCII)
_DATE_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})", re.ASCII)
_DIGITS_PATTERN = re.compile(r"[0-9]+")

# Two-digit NMEA years are read as 20YY
_CENTURY = 2000

# Date used for time-of-day-only sentences (GGA, GLL, GST)
ZERO_DATE = date.min

_NEGATIVE_HEMISPHERES = ("S", "W")
_HEMISPHERES = ("N", "S", "E", "W")


class FieldStatus(enum.Enum):
    """How a field value was obtained."""

    VALUE = "value"
    DEFAULT = "default"
    ERROR = "error"


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Outcome of decoding a single field.

    Attributes:
        status: VALUE when the field was parsed, DEFAULT when it was empty
            and the zero value was substituted, ERROR when it was malformed.
        value: The decoded (or default) value. For ERROR results this is
            the default value and must not be used.
        raw: The raw field text.
        error: Description of the failure for ERROR results.
    """

    status: FieldStatus
    value: T
    raw: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not FieldStatus.ERROR

    def unwrap(self) -> T:
        """Return the value, raising ``FieldDecodeError`` for ERROR results."""
        if self.status is FieldStatus.ERROR:
            raise FieldDecodeError(self.error or "invalid field", self.raw)
        return self.value


def _parsed(value: T, raw: str) -> FieldResult[T]:
    return FieldResult(FieldStatus.VALUE, value, raw)


def _default(value: T) -> FieldResult[T]:
    return FieldResult(FieldStatus.DEFAULT, value)


def _failed(default: T, raw: str, message: str) -> FieldResult[T]:
    return FieldResult(FieldStatus.ERROR, default, raw, f"{message}: {raw!r}")


def decode_float(value: str) -> FieldResult[float]:
    """Decode a decimal field; an empty field decodes to 0.0.

    Example:
        >>> decode_float("545.4").value
        545.4
        >>> decode_float("").status
        <FieldStatus.DEFAULT: 'default'>
        >>> decode_float("abc").status
        <FieldStatus.ERROR: 'error'>
    """
    if not value:
        return _default(0.0)
    if _DECIMAL_PATTERN.fullmatch(value) is None:
        return _failed(0.0, value, "not a decimal number")
    return _parsed(float(value), value)


def decode_int(value: str) -> FieldResult[int]:
    """Decode an integer field (PRNs, counts, codes); empty decodes to 0."""
    if not value:
        return _default(0)
    if _INTEGER_PATTERN.fullmatch(value) is None:
        return _failed(0, value, "not an integer")
    try:
        decoded = int(value)
    except ValueError as exc:
        # More digits than the interpreter converts
        return _failed(0, value, str(exc))
    return _parsed(decoded, value)


def decode_time(value: str) -> FieldResult[time]:
    """Decode an ``HHMMSS`` or ``HHMMSS.ss`` time-of-day field.

    The result is a UTC ``time``. Fractional seconds are kept to microsecond
    resolution; extra digits are truncated. An empty field decodes to
    midnight.

    Example:
        >>> decode_time("162254.00").value
        datetime.time(16, 22, 54, tzinfo=datetime.timezone.utc)
    """
    if not value:
        return _default(time(0, 0, tzinfo=timezone.utc))

    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        return _failed(time(0, 0, tzinfo=timezone.utc), value, "not an HHMMSS time")

    hours, minutes, seconds, fraction = match.groups()
    microseconds = int((fraction or "").ljust(6, "0")[:6])
    try:
        decoded = time(
            int(hours), int(minutes), int(seconds), microseconds, tzinfo=timezone.utc
        )
    except ValueError as exc:
        return _failed(time(0, 0, tzinfo=timezone.utc), value, str(exc))
    return _parsed(decoded, value)


def decode_date(value: str) -> FieldResult[date]:
    """Decode a ``DDMMYY`` date field, reading the year as 20YY.

    An empty field decodes to the zero date (0001-01-01).

    Example:
        >>> decode_date("110706").value
        datetime.date(2006, 7, 11)
    """
    if not value:
        return _default(ZERO_DATE)

    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        return _failed(ZERO_DATE, value, "not a DDMMYY date")

    day, month, year = (int(group) for group in match.groups())
    try:
        decoded = date(_CENTURY + year, month, day)
    except ValueError as exc:
        return _failed(ZERO_DATE, value, str(exc))
    return _parsed(decoded, value)


def _parse_coordinate_parts(value: str) -> tuple[int, float] | None:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees
    - MM.MMMM = decimal minutes

    The decimal point position determines the split between degrees and minutes:
    the 2 digits before the decimal point are always minutes. A value without a
    decimal point is split the same way from its end.

    Args:
        value: Coordinate string in DDDMM.MMMM format

    Returns:
        Tuple of (degrees, minutes) or None if parsing fails

    Example:
        >>> _parse_coordinate_parts("3723.02837")  # 37° 23.02837'
        (37, 23.02837)
        >>> _parse_coordinate_parts("12159.39853")  # 121° 59.39853'
        (121, 59.39853)
    """
    dot_position = value.find(".")
    if dot_position < 0:
        dot_position = len(value)
    if dot_position < 2:
        return None

    degrees_text = value[: dot_position - 2]
    minutes_text = value[dot_position - 2 :]
    if degrees_text and _DIGITS_PATTERN.fullmatch(degrees_text) is None:
        return None
    if _DIGITS_PATTERN.match(minutes_text) is None:
        return None
    if _DECIMAL_PATTERN.fullmatch(minutes_text) is None:
        return None

    try:
        return int(degrees_text or 0), float(minutes_text)
    except ValueError:
        return None


def decode_coordinate(value: str, hemisphere: str) -> FieldResult[float]:
    """Convert an NMEA coordinate (DDDMM.MMMM + hemisphere) to decimal degrees.

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    The result is negated for the southern and western hemispheres. An empty
    coordinate decodes to 0.0; an empty hemisphere is treated as N/E.

    Example:
        >>> decode_coordinate("3723.02837", "N").value
        37.38380616666667
        >>> decode_coordinate("12159.39853", "W").value
        -121.9899755
    """
    if not value:
        return _default(0.0)

    if hemisphere and hemisphere not in _HEMISPHERES:
        return _failed(0.0, hemisphere, "not a hemisphere indicator")

    parts = _parse_coordinate_parts(value)
    if parts is None:
        return _failed(0.0, value, "not a DDDMM.MMMM coordinate")

    degrees, minutes = parts
    decimal_degrees = degrees + minutes / 60.0

    if hemisphere in _NEGATIVE_HEMISPHERES:
        decimal_degrees = -decimal_degrees

    return _parsed(decimal_degrees, value)


def parse_float_field(value: str) -> float:
    """Parse a decimal field, returning 0.0 if empty.

    Raises:
        FieldDecodeError: If the field is non-empty and not a decimal number.
    """
    return decode_float(value).unwrap()


def parse_int_field(value: str) -> int:
    """Parse an integer field, returning 0 if empty.

    Raises:
        FieldDecodeError: If the field is non-empty and not an integer.
    """
    return decode_int(value).unwrap()


def parse_char_field(value: str) -> str:
    """Return a single-character status/flag field as-is ('' if empty).

    Used for fields like the RMC status ('A' = active, 'V' = void) or FAA
    mode indicators, where the raw character is meaningful.
    """
    return value


def parse_flag_field(value: str) -> bool:
    """Return True if an A/V status field is 'A' (active/valid)."""
    return value == "A"


def convert_to_decimal_degrees(value: str, direction: str) -> float:
    """Convert an NMEA coordinate to signed decimal degrees (0.0 if empty).

    Raises:
        FieldDecodeError: If the coordinate or hemisphere is malformed.
    """
    return decode_coordinate(value, direction).unwrap()


def parse_time_field(value: str) -> time:
    """Parse a time-of-day field (midnight if empty)."""
    return decode_time(value).unwrap()


def parse_date_field(value: str) -> date:
    """Parse a DDMMYY date field (zero date if empty)."""
    return decode_date(value).unwrap()


def combine_timestamp(day: date, time_of_day: time) -> datetime:
    """Combine a date and a UTC time of day into an aware ``datetime``."""
    return datetime.combine(day, time_of_day)


def parse_timestamp_field(value: str) -> datetime:
    """Parse a time-of-day field into a timestamp anchored at the zero date.

    Sentences such as GGA carry no date, so the resulting timestamp never
    borrows date components from any other sentence.

    Example:
        >>> parse_timestamp_field("162254.00")
        datetime.datetime(1, 1, 1, 16, 22, 54, tzinfo=datetime.timezone.utc)
    """
    return combine_timestamp(ZERO_DATE, parse_time_field(value))
