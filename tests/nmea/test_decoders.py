"""Tests for the sentence type dispatch table."""

import pytest

from nmeadecode.nmea import (
    SENTENCE_DECODERS,
    SUPPORTED_SENTENCE_TYPES,
    FieldDecodeError,
    RMCData,
    decode_sentence,
    read_sentence,
)
from nmeadecode.nmea.types import MARKER_RECORDS, BODData, WPLData
from tests.samples import RMC

MARKER_TYPES = [
    "ALM", "APA", "APB", "BOD", "BWC", "DTM", "GRS", "MSK", "MSS", "RMA",
    "RMB", "RTE", "TRF", "STN", "VBW", "WCV", "WPL", "XTC", "XTE", "ZTG",
]


class TestDecodeSentence:
    def test_supported_types(self):
        decoded = {"AAM", "GGA", "GLL", "GSA", "GST", "GSV", "RMC", "VTG", "ZDA"}
        assert SUPPORTED_SENTENCE_TYPES == decoded | set(MARKER_TYPES)
        assert set(SENTENCE_DECODERS) == SUPPORTED_SENTENCE_TYPES

    def test_marker_records_cover_marker_types(self):
        assert sorted(r.sentence_type for r in MARKER_RECORDS) == sorted(MARKER_TYPES)

    def test_decodes_by_type_code(self):
        record = decode_sentence(read_sentence(RMC))
        assert isinstance(record, RMCData)

    def test_talker_does_not_matter(self):
        sentence = read_sentence("$GNGGA,123519.00,,,,,0,00,,,,,,,*5B")
        assert sentence.talker == "GN"
        assert decode_sentence(sentence).sentence_type == "GGA"

    @pytest.mark.parametrize(
        "line, record_type",
        [
            ("$GPWPL,4917.16,N,12310.64,W,003*65", WPLData),
            ("$GPBOD,099.3,T,105.6,M,POINTB,POINTA*45", BODData),
        ],
    )
    def test_marker_types_decode_to_empty_records(self, line, record_type):
        assert decode_sentence(read_sentence(line)) == record_type()

    def test_unknown_type_is_not_an_error(self):
        assert decode_sentence(read_sentence("$GPXYZ,1,2,3*50")) is None

    def test_encapsulated_unknown_type(self):
        line = "!AIVDM,1,1,,B,15M67FC000G?ufbE`FepT@3n00Sa,0*5C"
        assert decode_sentence(read_sentence(line)) is None

    def test_malformed_field_raises(self):
        line = "$GPRMC,162254.00,A,3723.02837,N,12159.39853,W,fast,188.36,110706,,,A*50"
        with pytest.raises(FieldDecodeError) as excinfo:
            decode_sentence(read_sentence(line))
        assert excinfo.value.value == "fast"
