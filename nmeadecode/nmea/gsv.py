"""GSV sentence decoder.

GSV (GNSS Satellites in View) reports up to four satellites per sentence.
Receivers split the full list over several sentences sent back to back:

    $GPGSV,4,1,14,25,15,175,30,14,80,041,,19,38,259,14,01,52,223,18*76
           | | |  |           |
           | | |  +-----------+-- Satellite: PRN, elevation, azimuth, SNR
           | | +-- Total satellites in view
           | +-- Sentence number (1-based)
           +-- Total number of sentences

The last sentence of a run may hold fewer than four satellites. An empty
field within a satellite entry (typically the SNR of an untracked satellite)
decodes to 0.
"""

from nmeadecode.nmea.fields import parse_int_field
from nmeadecode.nmea.sentence import RawSentence, parse_sentence_as
from nmeadecode.nmea.types import GSVData, GSVSatInfo

_FIRST_SATELLITE_FIELD = 3
_FIELDS_PER_SATELLITE = 4


def _parse_satellite(group: list[str]) -> GSVSatInfo:
    prn, elevation, azimuth, snr = group
    return GSVSatInfo(
        prn=parse_int_field(prn),
        elevation=parse_int_field(elevation),
        azimuth=parse_int_field(azimuth),
        snr=parse_int_field(snr),
    )


def _parse_satellites(sentence: RawSentence) -> tuple[GSVSatInfo, ...]:
    """Decode the satellite entries, skipping entries that are entirely blank."""
    entries = sentence.fields[_FIRST_SATELLITE_FIELD:]
    satellites = []
    for start in range(0, len(entries), _FIELDS_PER_SATELLITE):
        group = list(entries[start : start + _FIELDS_PER_SATELLITE])
        group += [""] * (_FIELDS_PER_SATELLITE - len(group))
        if not any(group):
            continue
        satellites.append(_parse_satellite(group))
    return tuple(satellites)


def decode_gsv(sentence: RawSentence) -> GSVData:
    """Construct a GSVData object holding this sentence's own satellites."""
    fields = sentence.field
    return GSVData(
        total_sentences=parse_int_field(fields(0)),
        sentence_number=parse_int_field(fields(1)),
        in_view=parse_int_field(fields(2)),
        satellites=_parse_satellites(sentence),
    )


def parse_gsv(sentence: str) -> GSVData | None:
    """Parse a GSV sentence, returning None if it is invalid."""
    return parse_sentence_as(sentence, GSVData.sentence_type, decode_gsv)
