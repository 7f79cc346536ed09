"""Tests for GLL sentence parsing."""

from datetime import datetime, timezone

import pytest

from nmeadecode import parse_gll
from tests.samples import GLL, LATITUDE, LONGITUDE


class TestParseGLL:
    def test_valid_gll(self):
        result = parse_gll(GLL)
        assert result is not None
        assert result.latitude_degrees == pytest.approx(LATITUDE)
        assert result.longitude_degrees == pytest.approx(LONGITUDE)
        assert result.active is True
        assert result.timestamp == datetime(1, 1, 1, 16, 22, 54, tzinfo=timezone.utc)
        assert result.mode == "A"

    def test_void(self):
        result = parse_gll("$GPGLL,,,,,,V,N*64")
        assert result is not None
        assert result.active is False
        assert result.mode == "N"

    def test_invalid_time(self):
        assert parse_gll("$GPGLL,3723.02837,N,12159.39853,W,251200.00,A,A*7E") is None
