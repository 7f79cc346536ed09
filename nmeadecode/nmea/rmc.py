"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the one sentence that carries
both the date and the time of a fix, together with position and velocity.

RMC Sentence Format:
    $GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74
           |         | |          | |           | |     |      |      |||
           |         | |          | |           | |     |      |      ||+-- Mode (NMEA 2.3+)
           |         | |          | |           | |     |      |      |+-- Variation E/W
           |         | |          | |           | |     |      |      +-- Magnetic variation
           |         | |          | |           | |     |      +-- Date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground (true)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)
"""

from nmeadecode.nmea.fields import (
    combine_timestamp,
    convert_to_decimal_degrees,
    parse_char_field,
    parse_date_field,
    parse_float_field,
    parse_time_field,
)
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import RMCData


def _parse_magnetic_variation(value: str, direction: str) -> float:
    """Sign the magnetic variation by its own E/W field (West is negative)."""
    variation = parse_float_field(value)
    if direction == "W":
        return -variation
    return variation


def decode_rmc(sentence: RawSentence) -> RMCData:
    """Construct an RMCData object from tokenized fields.

    Raises:
        FieldDecodeError: If a non-empty field is malformed.
    """
    fields = sentence.field
    return RMCData(
        timestamp=combine_timestamp(
            parse_date_field(fields(8)), parse_time_field(fields(0))
        ),
        status=parse_char_field(fields(1)),
        latitude_degrees=convert_to_decimal_degrees(fields(2), fields(3)),
        longitude_degrees=convert_to_decimal_degrees(fields(4), fields(5)),
        speed_knots=parse_float_field(fields(6)),
        course_degrees=parse_float_field(fields(7)),
        magnetic_variation_degrees=_parse_magnetic_variation(fields(9), fields(10)),
        mode=parse_char_field(fields(11)),
    )


def parse_rmc(sentence: str) -> RMCData | None:
    """Parse an RMC sentence into structured data.

    Returns:
        RMCData if parsing succeeds, or None if the checksum is invalid, the
        sentence is not RMC, or a field is malformed.

    Example:
        >>> result = parse_rmc("$GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74")
        >>> result.latitude_degrees
        37.383806...
    """
    return parse_sentence_as(sentence, RMCData.sentence_type, decode_rmc)
