"""Tests for VTG sentence parsing."""

import pytest

from nmeadecode import parse_vtg
from tests.samples import VTG


class TestParseVTG:
    """Tests for parse_vtg function."""

    def test_valid_vtg(self):
        result = parse_vtg(VTG)
        assert result is not None
        assert result.track_true_degrees == pytest.approx(188.36)
        assert result.track_magnetic_degrees == 0.0
        assert result.speed_knots == pytest.approx(0.82)
        assert result.speed_kilometers_per_hour == pytest.approx(1.519)
        assert result.mode == "A"

    def test_valid_vtg_with_magnetic_track(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        assert result is not None
        assert result.track_true_degrees == pytest.approx(54.7)
        assert result.track_magnetic_degrees == pytest.approx(34.4)
        assert result.speed_knots == pytest.approx(5.5)
        assert result.speed_meters_per_second == pytest.approx(10.2 / 3.6)

    def test_vtg_stationary_empty_track(self):
        result = parse_vtg("$GNVTG,,T,,M,0.0,N,0.0,K,A*3D")
        assert result is not None
        assert result.track_true_degrees == 0.0
        assert result.speed_meters_per_second == 0.0

    def test_vtg_no_mode_indicator(self):
        result = parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K*56")
        assert result is not None and result.mode == ""

    def test_vtg_speed_mps_computed_correctly(self):
        result = parse_vtg("$GNVTG,000.0,T,000.0,M,000.0,N,036.0,K,A*38")
        assert result is not None
        assert result.speed_meters_per_second == pytest.approx(10.0)

    def test_vtg_malformed_track(self):
        assert parse_vtg("$GPVTG,1.2.3,T,,M,0.820,N,1.519,K,A*15") is None

    def test_vtg_invalid_checksum(self):
        assert parse_vtg("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*FF") is None

    def test_vtg_with_crlf(self):
        assert parse_vtg(VTG + "\r\n") is not None
