"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites):
    $GPGSA,A,2,25,01,22,,,,,,,,,,2.56,2.36,1.00*02
           | | |                 |    |    |
           | | |                 |    |    +-- VDOP
           | | |                 |    +-- HDOP
           | | |                 +-- PDOP
           | | +-- 12 PRN slots for satellites used in the solution
           | +-- Fix type (1=no fix, 2=2D, 3=3D)
           +-- Selection mode (A=automatic, M=manual)
"""

from nmeadecode.nmea.errors import FieldDecodeError
from nmeadecode.nmea.fields import parse_float_field, parse_int_field
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import FixType, GSAData

_FIRST_PRN_FIELD = 2
_PRN_SLOTS = 12
_PDOP_FIELD = _FIRST_PRN_FIELD + _PRN_SLOTS


def _parse_fix_type(value: str) -> FixType:
    """Decode the fix dimension; an empty field means no fix."""
    if not value:
        return FixType.NO_FIX
    try:
        return FixType(parse_int_field(value))
    except ValueError as exc:
        raise FieldDecodeError(f"unknown fix type: {value!r}", value) from exc


def _parse_satellites_used(sentence: RawSentence) -> tuple[int, ...]:
    slots = (
        sentence.field(index)
        for index in range(_FIRST_PRN_FIELD, _FIRST_PRN_FIELD + _PRN_SLOTS)
    )
    return tuple(parse_int_field(slot) for slot in slots if slot)


def decode_gsa(sentence: RawSentence) -> GSAData:
    """Construct a GSAData object from tokenized fields."""
    fields = sentence.field
    return GSAData(
        auto=fields(0) == "A",
        fix=_parse_fix_type(fields(1)),
        satellites_used=_parse_satellites_used(sentence),
        pdop=parse_float_field(fields(_PDOP_FIELD)),
        hdop=parse_float_field(fields(_PDOP_FIELD + 1)),
        vdop=parse_float_field(fields(_PDOP_FIELD + 2)),
    )


def parse_gsa(sentence: str) -> GSAData | None:
    """Parse a GSA sentence, returning None if it is invalid."""
    return parse_sentence_as(sentence, GSAData.sentence_type, decode_gsa)
