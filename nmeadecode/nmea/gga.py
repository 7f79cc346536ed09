"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,162254.00,3723.02837,N,12159.39853,W,1,03,2.36,525.6,M,-25.6,M,,*65
           |         |          | |           | | |  |    |     | |     | ||
           |         |          | |           | | |  |    |     | |     | |+-- DGPS station ID
           |         |          | |           | | |  |    |     | |     | +-- DGPS age (seconds)
           |         |          | |           | | |  |    |     | +-----+-- Geoid height (M=meters)
           |         |          | |           | | |  |    +-----+-- Altitude above MSL
           |         |          | |           | | |  +-- HDOP (horizontal dilution)
           |         |          | |           | | +-- Number of satellites
           |         |          | |           | +-- Fix quality (0-8)
           |         |          | +-----------+-- Longitude + E/W
           |         +----------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

GGA carries no date. Its timestamp is anchored at the zero date rather than
borrowing the date of an earlier RMC or ZDA sentence.

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Estimated (dead reckoning)
    7 = Manual input
    8 = Simulation
"""

from nmeadecode.nmea.errors import FieldDecodeError
from nmeadecode.nmea.fields import (
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
    parse_timestamp_field,
)
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import FixQuality, GGAData


def _parse_fix_quality(value: str) -> FixQuality:
    """Decode the fix quality code; an empty field means no fix."""
    code = parse_int_field(value)
    try:
        return FixQuality(code)
    except ValueError as exc:
        raise FieldDecodeError(f"unknown fix quality: {value!r}", value) from exc


def decode_gga(sentence: RawSentence) -> GGAData:
    """Construct a GGAData object from tokenized fields.

    Maps NMEA field indices to GGAData attributes:
        fields[0]  -> timestamp (HHMMSS.ss format, zero date)
        fields[1]  -> latitude (DDMM.MMMM format)
        fields[2]  -> latitude direction (N/S)
        fields[3]  -> longitude (DDDMM.MMMM format)
        fields[4]  -> longitude direction (E/W)
        fields[5]  -> fix_quality (0-8)
        fields[6]  -> num_satellites
        fields[7]  -> HDOP (horizontal dilution of precision)
        fields[8]  -> altitude above MSL (meters)
        fields[10] -> geoid height (meters)
        fields[12] -> age of differential corrections
        fields[13] -> differential reference station ID

    Raises:
        FieldDecodeError: If a non-empty field is malformed.
    """
    fields = sentence.field
    return GGAData(
        timestamp=parse_timestamp_field(fields(0)),
        latitude_degrees=convert_to_decimal_degrees(fields(1), fields(2)),
        longitude_degrees=convert_to_decimal_degrees(fields(3), fields(4)),
        fix_quality=_parse_fix_quality(fields(5)),
        num_satellites=parse_int_field(fields(6)),
        horizontal_dilution_of_precision=parse_float_field(fields(7)),
        altitude_meters=parse_float_field(fields(8)),
        geoid_height_meters=parse_float_field(fields(10)),
        dgps_age_seconds=parse_float_field(fields(12)),
        dgps_station_id=fields(13),
    )


def parse_gga(sentence: str) -> GGAData | None:
    """Parse a GGA sentence into structured data.

    Note:
        A returned GGAData with valid=False indicates a successfully parsed
        sentence that has no GPS fix (fix_quality=0). This is different from
        returning None, which indicates a malformed sentence.

    Example:
        >>> result = parse_gga("$GPGGA,162254.00,3723.02837,N,12159.39853,W,1,03,2.36,525.6,M,-25.6,M,,*65")
        >>> result.altitude_meters
        525.6
    """
    return parse_sentence_as(sentence, GGAData.sentence_type, decode_gga)
