"""Tests for reassembling GSV rounds."""

from nmeadecode import GSVAccumulator, GSVSatInfo, parse_gsv
from tests.samples import GSV_PARTS


def _parts(*numbers):
    return [parse_gsv(GSV_PARTS[number - 1]) for number in numbers]


class TestGSVAccumulator:
    def test_empty(self):
        accumulator = GSVAccumulator()
        assert accumulator.satellites == []
        assert accumulator.parts == 0
        assert accumulator.last_part == 0
        assert accumulator.in_view == 0

    def test_complete_round(self):
        accumulator = GSVAccumulator()
        for gsv in _parts(1, 2, 3, 4):
            accumulator.add(gsv)

        assert accumulator.in_view == 14
        assert accumulator.parts == 4
        assert accumulator.last_part == 4
        assert len(accumulator.satellites) == 14
        assert accumulator.satellites[0] == GSVSatInfo(25, 15, 175, 30)
        assert accumulator.satellites[-1] == GSVSatInfo(15, 25, 135, 0)

    def test_entries_kept_in_call_order_across_rounds(self):
        accumulator = GSVAccumulator()
        feed = _parts(2, 1, 3) + _parts(1, 2, 3, 4)
        for gsv in feed:
            accumulator.add(gsv)

        expected = [satellite for gsv in feed for satellite in gsv.satellites]
        assert len(accumulator.satellites) == 26
        assert accumulator.satellites == expected
        # The second sentence's entries come first, as they were added first
        assert accumulator.satellites[0] == GSVSatInfo(18, 16, 79, 0)
        assert accumulator.parts == 4
        assert accumulator.last_part == 4
        assert accumulator.in_view == 14

    def test_last_part_tracks_most_recent_sentence(self):
        accumulator = GSVAccumulator()
        for gsv in _parts(1, 2):
            accumulator.add(gsv)
        assert accumulator.last_part == 2
        assert accumulator.last_part != accumulator.parts

    def test_repr(self):
        accumulator = GSVAccumulator()
        accumulator.add(parse_gsv(GSV_PARTS[0]))
        assert repr(accumulator) == (
            "GSVAccumulator(in_view=14, parts=4, last_part=1, satellites=4)"
        )
