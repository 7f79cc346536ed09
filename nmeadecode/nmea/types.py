"""NMEA data types for decoded sentences.

This module defines one immutable dataclass per supported sentence type.

Design Decisions:
    1. Zero defaults, not None: NMEA devices routinely leave a field empty when
       a measurement is unavailable. Empty numeric fields decode to 0 / 0.0,
       empty flags to "", and empty times to midnight, so consumers never have
       to branch on missing values. A malformed field fails the whole sentence
       instead (see ``nmeadecode.nmea.fields``).

    2. Zero-date timestamps: sentences that only carry a time of day (GGA,
       GLL, GST) produce a ``datetime`` on the zero date (0001-01-01, UTC).
       Date components are never borrowed from an earlier RMC or ZDA.

    3. sentence_type tag: every record class carries the three-letter type
       code it is decoded from. Handlers are registered against that tag.

    4. Marker records: several sentence types are recognized but carry no
       decoded fields. They are still produced and dispatched, so a consumer
       can react to their arrival.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


class FixQuality(enum.IntEnum):
    """GGA fix quality indicator."""

    NO_FIX = 0
    GPS = 1
    DGPS = 2
    PPS = 3
    RTK = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATION = 8

    def __str__(self) -> str:
        return _FIX_QUALITY_NAMES[self]


_FIX_QUALITY_NAMES = {
    FixQuality.NO_FIX: "no fix",
    FixQuality.GPS: "gps fix",
    FixQuality.DGPS: "dgps fix",
    FixQuality.PPS: "pps",
    FixQuality.RTK: "real time kinematic",
    FixQuality.FLOAT_RTK: "float rt kinematic",
    FixQuality.ESTIMATED: "estimated",
    FixQuality.MANUAL: "manual",
    FixQuality.SIMULATION: "simulation",
}


class FixType(enum.IntEnum):
    """GSA fix dimension."""

    NO_FIX = 1
    FIX_2D = 2
    FIX_3D = 3

    def __str__(self) -> str:
        return _FIX_TYPE_NAMES[self]


_FIX_TYPE_NAMES = {
    FixType.NO_FIX: "no fix",
    FixType.FIX_2D: "2D",
    FixType.FIX_3D: "3D",
}


@dataclass(frozen=True)
class NMEARecord:
    """Base class of all decoded sentence records."""

    sentence_type: ClassVar[str] = ""


@dataclass(frozen=True)
class RMCData(NMEARecord):
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    RMC is the only common sentence carrying both a date and a time, so its
    timestamp is absolute.

    Attributes:
        timestamp: UTC date and time of the fix.
        status: 'A' = active (valid), 'V' = void (receiver warning).
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        speed_knots: Speed over ground in knots.
        course_degrees: Course over ground relative to true north.
        magnetic_variation_degrees: Magnetic variation, negative when West.
        mode: FAA mode indicator (NMEA 2.3+), "" on older receivers.

    Example:
        >>> rmc = parse_rmc("$GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74")
        >>> rmc.timestamp
        datetime.datetime(2006, 7, 11, 16, 22, 54, tzinfo=datetime.timezone.utc)
        >>> rmc.speed_knots
        0.82
    """

    sentence_type: ClassVar[str] = "RMC"

    timestamp: datetime
    status: str
    latitude_degrees: float
    longitude_degrees: float
    speed_knots: float
    course_degrees: float
    magnetic_variation_degrees: float
    mode: str = ""


@dataclass(frozen=True)
class GGAData(NMEARecord):
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        timestamp: Time of fix on the zero date (GGA carries no date).

        latitude_degrees: Latitude in decimal degrees, positive=North.
            Converted from NMEA's DDMM.MMMM format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Converted from NMEA's DDDMM.MMMM format.

        fix_quality: GPS fix quality indicator; NO_FIX when empty.

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better (< 1 = ideal, 1-2 = excellent,
            2-5 = good, > 10 = poor).

        altitude_meters: Altitude above mean sea level (MSL) in meters.

        geoid_height_meters: Height of geoid (MSL) above WGS84 ellipsoid.
            ellipsoid_height = altitude_meters + geoid_height_meters.

        dgps_age_seconds: Age of differential corrections.

        dgps_station_id: Differential reference station ID, "" if absent.

    Example:
        >>> gga = parse_gga("$GPGGA,162254.00,3723.02837,N,12159.39853,W,1,03,2.36,525.6,M,-25.6,M,,*65")
        >>> gga.fix_quality
        <FixQuality.GPS: 1>
        >>> gga.valid
        True
    """

    sentence_type: ClassVar[str] = "GGA"

    timestamp: datetime
    latitude_degrees: float
    longitude_degrees: float
    fix_quality: FixQuality
    num_satellites: int
    horizontal_dilution_of_precision: float
    altitude_meters: float
    geoid_height_meters: float
    dgps_age_seconds: float = 0.0
    dgps_station_id: str = ""

    @property
    def valid(self) -> bool:
        """Navigation validity: True unless the receiver reports no fix."""
        return self.fix_quality is not FixQuality.NO_FIX


@dataclass(frozen=True)
class GLLData(NMEARecord):
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Like GGA, GLL only carries a time of day; its timestamp is anchored at
    the zero date.
    """

    sentence_type: ClassVar[str] = "GLL"

    latitude_degrees: float
    longitude_degrees: float
    active: bool
    timestamp: datetime
    mode: str = ""


@dataclass(frozen=True)
class GSAData(NMEARecord):
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        auto: True for automatic 2D/3D selection ('A'), False for manual ('M').
        fix: Fix dimension.
        satellites_used: PRNs of satellites used in the solution, in slot
            order. Empty slots are skipped, so the tuple has 0-12 entries.
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
    """

    sentence_type: ClassVar[str] = "GSA"

    auto: bool
    fix: FixType
    satellites_used: tuple[int, ...]
    pdop: float
    hdop: float
    vdop: float


@dataclass(frozen=True)
class GSVSatInfo:
    """One satellite entry of a GSV sentence.

    Empty source fields decode to 0 (e.g. no SNR when the satellite is not
    tracked).
    """

    prn: int
    elevation: int
    azimuth: int
    snr: int


@dataclass(frozen=True)
class GSVData(NMEARecord):
    """Parsed GSV (GNSS Satellites in View) sentence.

    A single GSV sentence carries at most four satellites; the full list is
    split across ``total_sentences`` parts. This record only holds the
    entries of its own part. ``GSVAccumulator`` reassembles the complete
    list across parts.
    """

    sentence_type: ClassVar[str] = "GSV"

    total_sentences: int
    sentence_number: int
    in_view: int
    satellites: tuple[GSVSatInfo, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ZDAData(NMEARecord):
    """Parsed ZDA (Time and Date) sentence.

    Attributes:
        timestamp: Date and time. UTC when the local zone offset is zero or
            omitted; otherwise tagged with a fixed offset equal to the local
            zone fields (not converted to UTC).
    """

    sentence_type: ClassVar[str] = "ZDA"

    timestamp: datetime


@dataclass(frozen=True)
class AAMData(NMEARecord):
    """Parsed AAM (Waypoint Arrival Alarm) sentence.

    Attributes:
        arrival: True if the arrival circle has been entered.
        perpendicular: True if the perpendicular at the waypoint was passed.
        radius: Arrival circle radius.
        radius_units: Radius units ('N' = nautical miles).
        waypoint_id: Name of the waypoint.
    """

    sentence_type: ClassVar[str] = "AAM"

    arrival: bool
    perpendicular: bool
    radius: float
    radius_units: str = ""
    waypoint_id: str = ""


@dataclass(frozen=True)
class GSTData(NMEARecord):
    """Parsed GST (GNSS Pseudorange Error Statistics) sentence.

    Deviations are one-sigma values in meters; the orientation is in degrees
    from true north.
    """

    sentence_type: ClassVar[str] = "GST"

    timestamp: datetime
    rms_deviation: float
    semi_major_deviation: float
    semi_minor_deviation: float
    semi_major_orientation: float
    latitude_error: float
    longitude_error: float
    altitude_error: float


@dataclass(frozen=True)
class VTGData(NMEARecord):
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    VTG provides velocity information - ground speed and heading (track).

    Attributes:
        track_true_degrees: Track relative to true north in degrees.
            0.0 when stationary (no heading without movement).

        track_magnetic_degrees: Track relative to magnetic north in degrees.

        speed_knots: Ground speed in nautical miles per hour (knots).
            1 knot = 1.852 km/h = 0.514 m/s.

        speed_kilometers_per_hour: Ground speed in km/h.

        mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous (standard GPS positioning)
            'D' = Differential (DGPS or RTK - higher accuracy)
            'E' = Estimated (dead reckoning - no satellite fix)
            'N' = Not valid (no fix)
            "" if the field was missing (older receivers).

    Example:
        >>> vtg = parse_vtg("$GPVTG,188.36,T,,M,0.820,N,1.519,K,A*3F")
        >>> vtg.track_true_degrees
        188.36
        >>> vtg.speed_meters_per_second
        0.4219...
    """

    sentence_type: ClassVar[str] = "VTG"

    track_true_degrees: float
    track_magnetic_degrees: float
    speed_knots: float
    speed_kilometers_per_hour: float
    mode: str = ""

    @property
    def speed_meters_per_second(self) -> float:
        """Ground speed in m/s, derived from the km/h field."""
        return self.speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND


# Sentence types that are recognized and dispatched without decoded fields.


@dataclass(frozen=True)
class ALMData(NMEARecord):
    """GPS almanac data."""

    sentence_type: ClassVar[str] = "ALM"


@dataclass(frozen=True)
class APAData(NMEARecord):
    """Autopilot sentence "A"."""

    sentence_type: ClassVar[str] = "APA"


@dataclass(frozen=True)
class APBData(NMEARecord):
    """Autopilot sentence "B"."""

    sentence_type: ClassVar[str] = "APB"


@dataclass(frozen=True)
class BODData(NMEARecord):
    """Bearing, origin to destination."""

    sentence_type: ClassVar[str] = "BOD"


@dataclass(frozen=True)
class BWCData(NMEARecord):
    """Bearing and distance to waypoint using a great circle route."""

    sentence_type: ClassVar[str] = "BWC"


@dataclass(frozen=True)
class DTMData(NMEARecord):
    """Datum reference."""

    sentence_type: ClassVar[str] = "DTM"


@dataclass(frozen=True)
class GRSData(NMEARecord):
    """GPS range residuals."""

    sentence_type: ClassVar[str] = "GRS"


@dataclass(frozen=True)
class MSKData(NMEARecord):
    """Control for a beacon receiver."""

    sentence_type: ClassVar[str] = "MSK"


@dataclass(frozen=True)
class MSSData(NMEARecord):
    """Beacon receiver status."""

    sentence_type: ClassVar[str] = "MSS"


@dataclass(frozen=True)
class RMAData(NMEARecord):
    """Recommended minimum Loran-C data."""

    sentence_type: ClassVar[str] = "RMA"


@dataclass(frozen=True)
class RMBData(NMEARecord):
    """Recommended minimum navigation information."""

    sentence_type: ClassVar[str] = "RMB"


@dataclass(frozen=True)
class RTEData(NMEARecord):
    """Route."""

    sentence_type: ClassVar[str] = "RTE"


@dataclass(frozen=True)
class TRFData(NMEARecord):
    """Transit fix data."""

    sentence_type: ClassVar[str] = "TRF"


@dataclass(frozen=True)
class STNData(NMEARecord):
    """Multiple data ID."""

    sentence_type: ClassVar[str] = "STN"


@dataclass(frozen=True)
class VBWData(NMEARecord):
    """Dual ground/water speed."""

    sentence_type: ClassVar[str] = "VBW"


@dataclass(frozen=True)
class WCVData(NMEARecord):
    """Waypoint closure velocity."""

    sentence_type: ClassVar[str] = "WCV"


@dataclass(frozen=True)
class WPLData(NMEARecord):
    """Waypoint location."""

    sentence_type: ClassVar[str] = "WPL"


@dataclass(frozen=True)
class XTCData(NMEARecord):
    """Cross-track error."""

    sentence_type: ClassVar[str] = "XTC"


@dataclass(frozen=True)
class XTEData(NMEARecord):
    """Cross-track error, measured."""

    sentence_type: ClassVar[str] = "XTE"


@dataclass(frozen=True)
class ZTGData(NMEARecord):
    """UTC and time to destination waypoint."""

    sentence_type: ClassVar[str] = "ZTG"


MARKER_RECORDS: tuple[type[NMEARecord], ...] = (
    ALMData,
    APAData,
    APBData,
    BODData,
    BWCData,
    DTMData,
    GRSData,
    MSKData,
    MSSData,
    RMAData,
    RMBData,
    RTEData,
    TRFData,
    STNData,
    VBWData,
    WCVData,
    WPLData,
    XTCData,
    XTEData,
    ZTGData,
)
