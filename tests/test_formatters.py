"""Tests for JSON formatting of records."""

import json

from nmeadecode import GSVAccumulator, GSVSatInfo, parse_gga, parse_gsv, parse_rmc
from nmeadecode.formatters import format_record, format_satellites, record_to_dict
from tests.samples import GGA, GSV_PARTS, RMC


class TestFormatRecord:
    def test_rmc(self):
        message = json.loads(format_record(parse_rmc(RMC)))
        assert message["type"] == "RMC"
        assert message["timestamp"] == "2006-07-11T16:22:54+00:00"
        assert message["status"] == "A"
        assert message["speed_knots"] == 0.82

    def test_enum_fields_carry_their_name(self):
        message = record_to_dict(parse_gga(GGA))
        assert message["fix_quality"] == 1
        assert message["fix_quality_name"] == "gps fix"

    def test_gsv_satellites_become_objects(self):
        message = record_to_dict(parse_gsv(GSV_PARTS[3]))
        assert message["satellites"] == [
            {"prn": 7, "elevation": 1, "azimuth": 181, "snr": 0},
            {"prn": 15, "elevation": 25, "azimuth": 135, "snr": 0},
        ]


class TestFormatSatellites:
    def test_from_accumulator(self):
        accumulator = GSVAccumulator()
        for line in GSV_PARTS:
            accumulator.add(parse_gsv(line))
        message = json.loads(format_satellites(accumulator))
        assert message["type"] == "satellites"
        assert message["in_view"] == 14
        assert len(message["satellites"]) == 14

    def test_from_list(self):
        message = json.loads(format_satellites([GSVSatInfo(1, 2, 3, 4)]))
        assert message == {
            "type": "satellites",
            "in_view": 1,
            "satellites": [{"prn": 1, "elevation": 2, "azimuth": 3, "snr": 4}],
        }
