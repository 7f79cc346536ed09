"""GST sentence decoder.

GST (GNSS Pseudorange Error Statistics):
    $GPGST,024603.00,3.2,6.6,4.7,47.3,5.8,5.6,22.0*58
           |         |   |   |   |    |   |   |
           |         |   |   |   |    |   |   +-- Altitude error (1 sigma, m)
           |         |   |   |   |    |   +-- Longitude error (1 sigma, m)
           |         |   |   |   |    +-- Latitude error (1 sigma, m)
           |         |   |   |   +-- Orientation of the semi-major axis (degrees)
           |         |   |   +-- Semi-minor axis deviation (m)
           |         |   +-- Semi-major axis deviation (m)
           |         +-- RMS of the pseudorange residuals
           +-- UTC time (HHMMSS.ss), anchored at the zero date
"""

from nmeadecode.nmea.fields import parse_float_field, parse_timestamp_field
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import GSTData


def decode_gst(sentence: RawSentence) -> GSTData:
    """Construct a GSTData object from tokenized fields."""
    fields = sentence.field
    return GSTData(
        timestamp=parse_timestamp_field(fields(0)),
        rms_deviation=parse_float_field(fields(1)),
        semi_major_deviation=parse_float_field(fields(2)),
        semi_minor_deviation=parse_float_field(fields(3)),
        semi_major_orientation=parse_float_field(fields(4)),
        latitude_error=parse_float_field(fields(5)),
        longitude_error=parse_float_field(fields(6)),
        altitude_error=parse_float_field(fields(7)),
    )


def parse_gst(sentence: str) -> GSTData | None:
    """Parse a GST sentence, returning None if it is invalid."""
    return parse_sentence_as(sentence, GSTData.sentence_type, decode_gst)
