"""Reporting satellites-in-view lists once per GSV round.

A ``GSVAccumulator`` keeps appending whatever it is fed. Consumers that want
one list per round (the ``--satellites`` option, the server's satellites
message) register the handler built here for GSV records instead of
inspecting the accumulator themselves.
"""

import logging
from collections.abc import Callable

from nmeadecode.nmea.accumulator import GSVAccumulator
from nmeadecode.nmea.types import GSVData
from nmeadecode.stream.handlers import Handler
from nmeadecode.stream.processor import NMEAProcessor

__all__ = ["satellite_rounds"]

logger = logging.getLogger(__name__)


def _restart_round(processor: NMEAProcessor, gsv: GSVData) -> GSVAccumulator:
    accumulator = GSVAccumulator()
    accumulator.add(gsv)
    processor.accumulator = accumulator
    return accumulator


def satellite_rounds(
    processor: NMEAProcessor,
    on_round: Callable[[GSVAccumulator], None],
    on_gsv: Handler | None = None,
) -> Handler:
    """Build a GSV handler calling ``on_round`` for every completed round.

    The handler runs after ``processor`` has added the sentence to its
    accumulator. Once the last part of a round arrives, ``on_round``
    receives the accumulator and the processor starts a new one.

    A first part arriving while the accumulator still holds earlier entries
    means the previous round never completed (its last part was dropped).
    Those entries are discarded and the new round starts from this sentence,
    so a reported list never mixes two rounds.

    Args:
        processor: Processor whose ``accumulator`` is read and replaced.
        on_round: Called with the accumulator of each completed round.
        on_gsv: Optional handler also receiving every GSV record.
    """

    def handle(gsv: GSVData) -> None:
        if on_gsv is not None:
            on_gsv(gsv)

        accumulator = processor.accumulator
        held_over = len(accumulator.satellites) - len(gsv.satellites)
        if gsv.sentence_number == 1 and held_over > 0:
            logger.debug(
                "Discarding %d satellites of an incomplete GSV round",
                held_over,
            )
            accumulator = _restart_round(processor, gsv)

        if accumulator.parts and accumulator.last_part == accumulator.parts:
            on_round(accumulator)
            processor.accumulator = GSVAccumulator()

    return handle
