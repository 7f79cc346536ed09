"""Tests for GST sentence parsing."""

from datetime import datetime, timezone

import pytest

from nmeadecode import parse_gst
from tests.samples import GST


class TestParseGST:
    def test_valid_gst(self):
        result = parse_gst(GST)
        assert result is not None
        assert result.timestamp == datetime(1, 1, 1, 2, 46, 3, tzinfo=timezone.utc)
        assert result.rms_deviation == pytest.approx(3.2)
        assert result.semi_major_deviation == pytest.approx(6.6)
        assert result.semi_minor_deviation == pytest.approx(4.7)
        assert result.semi_major_orientation == pytest.approx(47.3)
        assert result.latitude_error == pytest.approx(5.8)
        assert result.longitude_error == pytest.approx(5.6)
        assert result.altitude_error == pytest.approx(22.0)

    def test_empty_deviations_decode_to_zero(self):
        result = parse_gst("$GPGST,024603.00,3.2,,4.7,47.3,5.8,5.6,*68")
        assert result is not None
        assert result.semi_major_deviation == 0.0
        assert result.altitude_error == 0.0

    def test_malformed_time(self):
        assert parse_gst("$GPGST,02460x.00,3.2,6.6,4.7,47.3,5.8,5.6,22.0*13") is None
