"""NMEA 0183 sentence decoding."""

from nmeadecode.nmea.aam import parse_aam
from nmeadecode.nmea.accumulator import GSVAccumulator
from nmeadecode.nmea.checksum import calculate_checksum, validate_checksum
from nmeadecode.nmea.decoders import (
    SENTENCE_DECODERS,
    SUPPORTED_SENTENCE_TYPES,
    decode_sentence,
)
from nmeadecode.nmea.errors import (
    ChecksumInvalidError,
    FieldDecodeError,
    NMEAError,
    SourceReadError,
)
from nmeadecode.nmea.gga import parse_gga
from nmeadecode.nmea.gll import parse_gll
from nmeadecode.nmea.gsa import parse_gsa
from nmeadecode.nmea.gst import parse_gst
from nmeadecode.nmea.gsv import parse_gsv
from nmeadecode.nmea.rmc import parse_rmc
from nmeadecode.nmea.sentence import RawSentence, read_sentence, tokenize_sentence
from nmeadecode.nmea.types import (
    AAMData,
    FixQuality,
    FixType,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    GSVSatInfo,
    NMEARecord,
    RMCData,
    VTGData,
    ZDAData,
)
from nmeadecode.nmea.vtg import parse_vtg
from nmeadecode.nmea.zda import parse_zda

__all__ = [
    "AAMData",
    "ChecksumInvalidError",
    "FieldDecodeError",
    "FixQuality",
    "FixType",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSTData",
    "GSVAccumulator",
    "GSVData",
    "GSVSatInfo",
    "NMEAError",
    "NMEARecord",
    "RMCData",
    "RawSentence",
    "SENTENCE_DECODERS",
    "SUPPORTED_SENTENCE_TYPES",
    "SourceReadError",
    "VTGData",
    "ZDAData",
    "calculate_checksum",
    "decode_sentence",
    "parse_aam",
    "parse_gga",
    "parse_gll",
    "parse_gsa",
    "parse_gst",
    "parse_gsv",
    "parse_rmc",
    "parse_vtg",
    "parse_zda",
    "read_sentence",
    "tokenize_sentence",
    "validate_checksum",
]
