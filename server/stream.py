"""Background NMEA reading loop.

Runs in a worker thread: reads the configured NMEA source line by line,
decodes each line and broadcasts every dispatched record as JSON to the
WebSocket subscribers. Completed satellites-in-view rounds are broadcast as
a ``satellites`` message and kept for the ``/satellites`` endpoint.
"""

import asyncio
import json
import logging
from collections.abc import Iterable
from typing import Any, TextIO

from nmeadecode.formatters import format_record, satellites_to_dict
from nmeadecode.nmea.accumulator import GSVAccumulator
from nmeadecode.nmea.errors import SourceReadError
from nmeadecode.nmea.types import GSVData, NMEARecord
from nmeadecode.stream.handlers import HandlerRegistry
from nmeadecode.stream.processor import NMEAProcessor
from nmeadecode.stream.satellites import satellite_rounds
from server.broadcaster import broadcast_message
from server.config import Config

__all__ = ["latest_satellites", "open_nmea_source", "run_nmea_loop", "run_nmea_source"]

logger = logging.getLogger(__name__)

_latest_satellites: dict[str, Any] = satellites_to_dict(())


def latest_satellites() -> dict[str, Any]:
    """Return the ``satellites`` message of the last completed GSV round."""
    return _latest_satellites


def _publish_satellites(
    accumulator: GSVAccumulator, loop: asyncio.AbstractEventLoop
) -> None:
    global _latest_satellites
    _latest_satellites = satellites_to_dict(accumulator)
    broadcast_message(json.dumps(_latest_satellites), loop)


def _build_processor(
    loop: asyncio.AbstractEventLoop, sentence_types: Iterable[str]
) -> NMEAProcessor:
    registry = HandlerRegistry()
    processor = NMEAProcessor(registry)

    def on_record(record: NMEARecord) -> None:
        broadcast_message(format_record(record), loop)

    sentence_types = tuple(sentence_types)
    for sentence_type in sentence_types:
        registry.register(sentence_type, on_record)

    def on_round(accumulator: GSVAccumulator) -> None:
        _publish_satellites(accumulator, loop)

    forward_gsv = on_record if GSVData.sentence_type in sentence_types else None
    registry.register(
        GSVData, satellite_rounds(processor, on_round, on_gsv=forward_gsv)
    )
    return processor


def run_nmea_loop(
    loop: asyncio.AbstractEventLoop,
    source: Iterable[str],
    sentence_types: Iterable[str] | None = None,
) -> None:
    """Decode NMEA lines continuously and broadcast them to the event loop.

    The caller owns *source*. The loop returns when the source is exhausted.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        source: Iterable of NMEA lines (an open file or tty).
        sentence_types: Type codes to broadcast; defaults to
            ``Config.SENTENCE_TYPES``.

    Raises:
        SourceReadError: If reading from the source fails.
    """
    if sentence_types is None:
        sentence_types = Config.SENTENCE_TYPES
    processor = _build_processor(loop, sentence_types)
    processor.process(source)
    logger.info(
        "NMEA source exhausted: %d lines, %d records decoded",
        processor.stats.lines_read,
        processor.stats.records_decoded,
    )


def open_nmea_source(path: str) -> TextIO:
    """Open a file or tty emitting NMEA lines."""
    return open(path, encoding="ascii", errors="replace")


def run_nmea_source(loop: asyncio.AbstractEventLoop, path: str) -> None:
    """Open *path* and stream its NMEA records until it ends or fails."""
    logger.info("Reading NMEA sentences from %s", path)
    try:
        with open_nmea_source(path) as source:
            run_nmea_loop(loop, source)
    except (OSError, SourceReadError):
        logger.exception("NMEA source %s failed", path)
