"""AAM sentence decoder.

AAM (Waypoint Arrival Alarm):
    $GPAAM,A,A,0.10,N,WPTNME*32
           | | |    | |
           | | |    | +-- Waypoint ID
           | | |    +-- Radius units (N=nautical miles)
           | | +-- Arrival circle radius
           | +-- Perpendicular passed at waypoint (A=yes, V=no)
           +-- Arrival circle entered (A=yes, V=no)
"""

from nmeadecode.nmea.fields import parse_char_field, parse_flag_field, parse_float_field
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import AAMData


def decode_aam(sentence: RawSentence) -> AAMData:
    """Construct an AAMData object from tokenized fields."""
    fields = sentence.field
    return AAMData(
        arrival=parse_flag_field(fields(0)),
        perpendicular=parse_flag_field(fields(1)),
        radius=parse_float_field(fields(2)),
        radius_units=parse_char_field(fields(3)),
        waypoint_id=fields(4),
    )


def parse_aam(sentence: str) -> AAMData | None:
    """Parse an AAM sentence, returning None if it is invalid."""
    return parse_sentence_as(sentence, AAMData.sentence_type, decode_aam)
