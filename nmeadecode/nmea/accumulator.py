"""Reassembly of satellites-in-view lists split across GSV sentences."""

from nmeadecode.nmea.types import GSVData, GSVSatInfo


class GSVAccumulator:
    """Collects the satellite entries of successive GSV sentences.

    Each call to ``add`` appends the satellites of one sentence in call
    order, without sorting by PRN or by sentence number, and records the
    totals it declares. The accumulator never clears itself: entries of a
    finished round stay in ``satellites`` when the next round starts.
    Callers that want one list per round compare ``last_part`` with
    ``parts`` after each ``add`` and start a new accumulator once they are
    equal.

    One accumulator belongs to one sentence stream. It has no locking and
    must not be shared between streams read concurrently.

    Attributes:
        in_view: Total satellites in view declared by the last sentence.
        parts: Total number of sentences declared by the last sentence.
        last_part: Sentence number of the last sentence added.
        satellites: Satellite entries accumulated so far.

    Example:
        >>> accumulator = GSVAccumulator()
        >>> for line in gsv_lines:
        ...     accumulator.add(parse_gsv(line))
        >>> accumulator.last_part == accumulator.parts
        True
    """

    def __init__(self) -> None:
        self.in_view = 0
        self.parts = 0
        self.last_part = 0
        self.satellites: list[GSVSatInfo] = []

    def add(self, gsv: GSVData) -> None:
        """Append the satellites of one GSV sentence."""
        self.in_view = gsv.in_view
        self.parts = gsv.total_sentences
        self.last_part = gsv.sentence_number
        self.satellites.extend(gsv.satellites)

    def __repr__(self) -> str:
        return (
            f"GSVAccumulator(in_view={self.in_view}, parts={self.parts}, "
            f"last_part={self.last_part}, satellites={len(self.satellites)})"
        )
