"""Decoding of NMEA 0183 sentences into typed records."""

from nmeadecode.nmea import (
    AAMData,
    ChecksumInvalidError,
    FieldDecodeError,
    FixQuality,
    FixType,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVAccumulator,
    GSVData,
    GSVSatInfo,
    NMEAError,
    NMEARecord,
    RMCData,
    SourceReadError,
    VTGData,
    ZDAData,
    parse_aam,
    parse_gga,
    parse_gll,
    parse_gsa,
    parse_gst,
    parse_gsv,
    parse_rmc,
    parse_vtg,
    parse_zda,
    validate_checksum,
)
from nmeadecode.stream import (
    HandlerRegistry,
    NMEAProcessor,
    ProcessStats,
    process,
    satellite_rounds,
)

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
    "HandlerRegistry",
    "NMEAError",
    "NMEAProcessor",
    "NMEARecord",
    "ProcessStats",
    "RMCData",
    "SourceReadError",
    "VTGData",
    "ZDAData",
    "parse_aam",
    "parse_gga",
    "parse_gll",
    "parse_gsa",
    "parse_gst",
    "parse_gsv",
    "parse_rmc",
    "parse_vtg",
    "parse_zda",
    "process",
    "satellite_rounds",
    "validate_checksum",
]
