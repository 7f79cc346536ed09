"""Line-by-line decode-and-dispatch loop.

``NMEAProcessor`` reads one line at a time from a text or byte source,
validates and decodes it, and hands the resulting record to the handler
registered for its sentence type.

Reading strategy:
    Each line is fully validated, decoded and dispatched before the next
    line is read. Lines that are blank, fail the checksum, or contain a
    malformed field are dropped and the loop continues. Unknown sentence
    types are ignored. Only a failure of the source itself stops the loop,
    as a ``SourceReadError``.

    GSV records are added to the processor's ``GSVAccumulator`` before they
    are dispatched, so a GSV handler already sees its own sentence in the
    accumulated list.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from nmeadecode.nmea.accumulator import GSVAccumulator
from nmeadecode.nmea.decoders import decode_sentence
from nmeadecode.nmea.errors import (
    ChecksumInvalidError,
    FieldDecodeError,
    SourceReadError,
)
from nmeadecode.nmea.sentence import read_sentence
from nmeadecode.nmea.types import GSVData, NMEARecord
from nmeadecode.stream.handlers import Handler, as_registry

__all__ = ["NMEAProcessor", "ProcessStats", "process"]

logger = logging.getLogger(__name__)

Line = str | bytes


@dataclass
class ProcessStats:
    """Counters describing what happened to the lines read so far."""

    lines_read: int = 0
    blank_lines: int = 0
    checksum_failures: int = 0
    decode_failures: int = 0
    ignored_sentences: int = 0
    records_decoded: int = 0
    records_dispatched: int = 0


def _decode_line(line: Line) -> str:
    if isinstance(line, bytes):
        return line.decode("ascii", errors="replace")
    return line


def _read_lines(source: Iterable[Line]) -> Iterator[str]:
    """Yield lines from ``source``, wrapping read failures in SourceReadError."""
    iterator = iter(source)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Failed to read NMEA source: {e}") from e
        yield _decode_line(line)


class NMEAProcessor:
    """Decodes NMEA lines and dispatches records to registered handlers.

    One processor (and its accumulator) serves one sentence stream. It is not
    thread-safe; read concurrent streams with one processor each.

    Handlers run synchronously. A slow handler stalls the loop, and an
    exception raised by a handler propagates out of ``process``.

    Example::

        registry = HandlerRegistry()
        registry.register("RMC", print)
        with open("track.nmea", encoding="ascii", errors="replace") as source:
            NMEAProcessor(registry).process(source)

    Args:
        handlers: Type code -> callback table (a ``HandlerRegistry`` or any
            mapping). Types without an entry are decoded and discarded.
        accumulator: Accumulator receiving every decoded GSV record. A new
            one is created when omitted; it can be replaced at any time via
            the ``accumulator`` attribute.
        track_satellites: When False, GSV records are only dispatched and
            the accumulator stays empty.
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler] | None = None,
        accumulator: GSVAccumulator | None = None,
        track_satellites: bool = True,
    ) -> None:
        self.handlers = as_registry(handlers)
        self.track_satellites = track_satellites
        self.accumulator = accumulator if accumulator is not None else GSVAccumulator()
        self.stats = ProcessStats()

    def _decode(self, line: str) -> NMEARecord | None:
        """Validate and decode one non-blank line; None if it is dropped."""
        try:
            sentence = read_sentence(line)
        except ChecksumInvalidError:
            self.stats.checksum_failures += 1
            logger.debug("Dropping line with invalid checksum: %r", line)
            return None

        try:
            record = decode_sentence(sentence)
        except FieldDecodeError as e:
            self.stats.decode_failures += 1
            logger.debug("Dropping %s sentence: %s", sentence.sentence_type, e)
            return None

        if record is None:
            self.stats.ignored_sentences += 1
            logger.debug("Ignoring unsupported sentence type %r", sentence.sentence_type)
        return record

    def _dispatch(self, record: NMEARecord) -> None:
        handler = self.handlers.get(record.sentence_type)
        if handler is None:
            return
        handler(record)
        self.stats.records_dispatched += 1

    def process_line(self, line: Line) -> NMEARecord | None:
        """Decode one line and dispatch the resulting record.

        Returns:
            The decoded record, or None if the line was blank, invalid,
            malformed or of an unsupported type.
        """
        self.stats.lines_read += 1
        text = _decode_line(line).strip()
        if not text:
            self.stats.blank_lines += 1
            return None

        record = self._decode(text)
        if record is None:
            return None

        self.stats.records_decoded += 1
        if self.track_satellites and isinstance(record, GSVData):
            self.accumulator.add(record)
        self._dispatch(record)
        return record

    def process(self, source: Iterable[Line]) -> None:
        """Process every line of ``source`` until it is exhausted.

        Raises:
            SourceReadError: If reading from the source fails.
        """
        try:
            for line in _read_lines(source):
                self.process_line(line)
        except SourceReadError:
            logger.error("NMEA source failed after %d lines", self.stats.lines_read)
            raise


def process(
    source: Iterable[Line],
    handlers: Mapping[str, Handler] | None = None,
    accumulator: GSVAccumulator | None = None,
) -> ProcessStats:
    """Decode and dispatch every line of ``source``.

    Convenience wrapper creating a single-use ``NMEAProcessor``.

    Returns:
        The counters of the run.

    Raises:
        SourceReadError: If reading from the source fails.
    """
    processor = NMEAProcessor(handlers, accumulator)
    processor.process(source)
    return processor.stats
