"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GPVTG,188.36,T,,M,0.820,N,1.519,K,A*3F
           |      | || |     | |     | |
           |      | || |     | |     | +-- Mode indicator (A/D/E/N)
           |      | || |     | +-----+-- Speed in km/h
           |      | || +-----+-- Speed in knots
           |      | ++-- Track (magnetic north, degrees)
           +------+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not
moving); it then decodes to 0.0.
"""

from nmeadecode.nmea.fields import parse_char_field, parse_float_field
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import VTGData


def decode_vtg(sentence: RawSentence) -> VTGData:
    """Construct a VTGData object from tokenized fields.

    Maps NMEA field indices to VTGData attributes:
        fields[0] -> track_true_degrees (heading relative to true north)
        fields[2] -> track_magnetic_degrees
        fields[4] -> speed_knots
        fields[6] -> speed_kilometers_per_hour
        fields[8] -> mode (FAA mode indicator, if present)
    """
    fields = sentence.field
    return VTGData(
        track_true_degrees=parse_float_field(fields(0)),
        track_magnetic_degrees=parse_float_field(fields(2)),
        speed_knots=parse_float_field(fields(4)),
        speed_kilometers_per_hour=parse_float_field(fields(6)),
        mode=parse_char_field(fields(8)),
    )


def parse_vtg(sentence: str) -> VTGData | None:
    """Parse a VTG sentence into structured data.

    Example:
        >>> result = parse_vtg("$GPVTG,188.36,T,,M,0.820,N,1.519,K,A*3F")
        >>> result.speed_kilometers_per_hour
        1.519
    """
    return parse_sentence_as(sentence, VTGData.sentence_type, decode_vtg)
