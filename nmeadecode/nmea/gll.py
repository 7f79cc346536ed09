"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude):
    $GPGLL,3723.02837,N,12159.39853,W,162254.00,A,A*7C
           |          | |           | |         | |
           |          | |           | |         | +-- Mode (NMEA 2.3+)
           |          | |           | |         +-- Status (A=active, V=void)
           |          | |           | +-- UTC time (HHMMSS.ss)
           |          | +-----------+-- Longitude + E/W
           +----------+-- Latitude + N/S

Like GGA, the timestamp is a time of day on the zero date.
"""

from nmeadecode.nmea.fields import (
    convert_to_decimal_degrees,
    parse_char_field,
    parse_flag_field,
    parse_timestamp_field,
)
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import GLLData


def decode_gll(sentence: RawSentence) -> GLLData:
    """Construct a GLLData object from tokenized fields."""
    fields = sentence.field
    return GLLData(
        latitude_degrees=convert_to_decimal_degrees(fields(0), fields(1)),
        longitude_degrees=convert_to_decimal_degrees(fields(2), fields(3)),
        timestamp=parse_timestamp_field(fields(4)),
        active=parse_flag_field(fields(5)),
        mode=parse_char_field(fields(6)),
    )


def parse_gll(sentence: str) -> GLLData | None:
    """Parse a GLL sentence, returning None if it is invalid."""
    return parse_sentence_as(sentence, GLLData.sentence_type, decode_gll)
