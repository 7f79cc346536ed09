"""Tests for GSV sentence parsing."""

from nmeadecode import GSVSatInfo, parse_gsv
from tests.samples import GSV_PARTS


class TestParseGSV:
    def test_first_part(self):
        result = parse_gsv(GSV_PARTS[0])
        assert result is not None
        assert result.total_sentences == 4
        assert result.sentence_number == 1
        assert result.in_view == 14
        assert result.satellites == (
            GSVSatInfo(25, 15, 175, 30),
            GSVSatInfo(14, 80, 41, 0),
            GSVSatInfo(19, 38, 259, 14),
            GSVSatInfo(1, 52, 223, 18),
        )

    def test_last_part_holds_only_its_own_satellites(self):
        result = parse_gsv(GSV_PARTS[3])
        assert result is not None
        assert result.sentence_number == 4
        assert result.satellites == (
            GSVSatInfo(7, 1, 181, 0),
            GSVSatInfo(15, 25, 135, 0),
        )

    def test_missing_snr_decodes_to_zero(self):
        result = parse_gsv(GSV_PARTS[2])
        assert result is not None
        assert result.satellites[-1] == GSVSatInfo(9, 7, 36, 0)

    def test_short_last_entry(self):
        result = parse_gsv("$GPGSV,3,3,09,07,01,181,*4E")
        assert result is not None
        assert result.satellites == (GSVSatInfo(7, 1, 181, 0),)

    def test_no_satellites(self):
        result = parse_gsv("$GPGSV,1,1,00*79")
        assert result is not None
        assert result.in_view == 0
        assert result.satellites == ()

    def test_malformed_prn(self):
        assert parse_gsv("$GPGSV,1,1,01,xx,10,100,20*4A") is None
