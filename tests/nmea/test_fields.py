"""Tests for NMEA field decoders."""

from datetime import date, datetime, time, timezone

import pytest

from nmeadecode.nmea.errors import FieldDecodeError
from nmeadecode.nmea.fields import (
    ZERO_DATE,
    FieldStatus,
    convert_to_decimal_degrees,
    decode_coordinate,
    decode_date,
    decode_float,
    decode_int,
    decode_time,
    parse_float_field,
    parse_int_field,
    parse_timestamp_field,
)


class TestDecodeFloat:
    def test_value(self):
        result = decode_float("545.4")
        assert result.status is FieldStatus.VALUE
        assert result.value == pytest.approx(545.4)

    def test_empty_is_soft_zero(self):
        result = decode_float("")
        assert result.status is FieldStatus.DEFAULT
        assert result.value == 0.0
        assert result.unwrap() == 0.0

    @pytest.mark.parametrize("value", ["-25.6", "+1.5", ".5", "7.", "0188"])
    def test_accepted_forms(self, value):
        assert decode_float(value).status is FieldStatus.VALUE

    @pytest.mark.parametrize(
        "value", ["abc", "nan", "inf", "1_0", " 1.0", "1.2.3", "-", "\u0663.5"]
    )
    def test_malformed_is_error(self, value):
        result = decode_float(value)
        assert result.status is FieldStatus.ERROR
        assert not result.ok
        with pytest.raises(FieldDecodeError) as exc_info:
            result.unwrap()
        assert exc_info.value.value == value


class TestDecodeInt:
    def test_leading_zeros(self):
        assert decode_int("08").value == 8

    def test_negative(self):
        assert decode_int("-5").value == -5

    def test_empty_is_soft_zero(self):
        assert decode_int("").status is FieldStatus.DEFAULT

    def test_decimal_is_error(self):
        assert decode_int("1.5").status is FieldStatus.ERROR

    def test_non_ascii_digit_is_error(self):
        assert decode_int("\u0663").status is FieldStatus.ERROR

    def test_too_many_digits_is_error(self):
        assert decode_int("9" * 5000).status is FieldStatus.ERROR


class TestDecodeTime:
    def test_time_with_fraction(self):
        result = decode_time("162254.25")
        assert result.value == time(16, 22, 54, 250000, tzinfo=timezone.utc)

    def test_time_without_fraction(self):
        assert decode_time("050306").value == time(5, 3, 6, tzinfo=timezone.utc)

    def test_empty_is_midnight(self):
        result = decode_time("")
        assert result.status is FieldStatus.DEFAULT
        assert result.value == time(0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["1622", "16225x", "251200.00", "166000", "1622540"])
    def test_malformed_is_error(self, value):
        assert decode_time(value).status is FieldStatus.ERROR


class TestDecodeDate:
    def test_two_digit_year_is_twenty_first_century(self):
        assert decode_date("110706").value == date(2006, 7, 11)
        assert decode_date("230394").value == date(2094, 3, 23)

    def test_empty_is_zero_date(self):
        result = decode_date("")
        assert result.status is FieldStatus.DEFAULT
        assert result.value == ZERO_DATE

    @pytest.mark.parametrize("value", ["320706", "111306", "1107", "11O706"])
    def test_malformed_is_error(self, value):
        assert decode_date(value).status is FieldStatus.ERROR


class TestDecodeCoordinate:
    def test_north(self):
        assert decode_coordinate("3723.02837", "N").value == pytest.approx(37.383806166)

    def test_west_is_negative(self):
        assert decode_coordinate("12159.39853", "W").value == pytest.approx(-121.9899755)

    def test_south_is_negative(self):
        assert convert_to_decimal_degrees("3356.123", "S") == pytest.approx(
            -33.93538333, rel=1e-6
        )

    def test_without_decimal_point(self):
        assert decode_coordinate("4807", "N").value == pytest.approx(48.116666667)

    def test_less_than_one_degree(self):
        assert decode_coordinate("30.0", "E").value == pytest.approx(0.5)

    def test_empty_is_soft_zero(self):
        result = decode_coordinate("", "")
        assert result.status is FieldStatus.DEFAULT
        assert result.value == 0.0

    @pytest.mark.parametrize(
        ("value", "hemisphere"),
        [
            ("3723.02837", "X"),
            ("ab23.0", "N"),
            ("5.0", "N"),
            ("37-3.0", "N"),
            ("\u00b223.02837", "N"),
            ("37\u00b23.0", "N"),
        ],
    )
    def test_malformed_is_error(self, value, hemisphere):
        assert decode_coordinate(value, hemisphere).status is FieldStatus.ERROR


class TestParseHelpers:
    def test_parse_float_field_raises_on_garbage(self):
        with pytest.raises(FieldDecodeError):
            parse_float_field("fast")

    def test_parse_int_field_empty(self):
        assert parse_int_field("") == 0

    def test_timestamp_is_anchored_at_zero_date(self):
        assert parse_timestamp_field("162254.00") == datetime(
            1, 1, 1, 16, 22, 54, tzinfo=timezone.utc
        )
