"""Command-line NMEA decoder.

Reads NMEA 0183 lines from files (or standard input) and prints one JSON
object per decoded record::

    nmeadecode track.nmea
    cat /dev/ttyACM0 | nmeadecode --type RMC --type GGA
    nmeadecode --satellites --log-level DEBUG track.nmea
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from contextlib import AbstractContextManager, nullcontext
from typing import TextIO

from nmeadecode.formatters import format_record, format_satellites
from nmeadecode.nmea.accumulator import GSVAccumulator
from nmeadecode.nmea.decoders import SUPPORTED_SENTENCE_TYPES
from nmeadecode.nmea.errors import SourceReadError
from nmeadecode.nmea.types import GSVData, NMEARecord
from nmeadecode.stream.handlers import HandlerRegistry
from nmeadecode.stream.processor import NMEAProcessor
from nmeadecode.stream.satellites import satellite_rounds

logger = logging.getLogger("nmeadecode")

_STDIN = "-"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nmeadecode",
        description="Decode NMEA 0183 sentences into JSON lines.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=[_STDIN],
        help="Files to decode ('-' or nothing reads standard input)",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="types",
        action="append",
        type=str.upper,
        choices=sorted(SUPPORTED_SENTENCE_TYPES),
        metavar="TYPE",
        help="Only print records of this sentence type (repeatable)",
    )
    parser.add_argument(
        "--satellites",
        action="store_true",
        help="Print the satellites-in-view list whenever a GSV round completes",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def _print_record(record: NMEARecord) -> None:
    print(format_record(record))


def _print_satellites(accumulator: GSVAccumulator) -> None:
    print(format_satellites(accumulator))


def _build_processor(types: Sequence[str], satellites: bool) -> NMEAProcessor:
    registry = HandlerRegistry()
    for sentence_type in types:
        registry.register(sentence_type, _print_record)
    processor = NMEAProcessor(registry, track_satellites=satellites)

    if satellites:
        print_gsv = _print_record if GSVData.sentence_type in types else None
        registry.register(
            GSVData, satellite_rounds(processor, _print_satellites, on_gsv=print_gsv)
        )

    return processor


def _open_source(path: str) -> AbstractContextManager[TextIO]:
    if path == _STDIN:
        return nullcontext(sys.stdin)
    return open(path, encoding="ascii", errors="replace")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the decoder; returns the process exit status."""
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format=_LOG_FORMAT, stream=sys.stderr)

    types = args.types or sorted(SUPPORTED_SENTENCE_TYPES)
    processor = _build_processor(types, args.satellites)

    for path in args.files:
        try:
            with _open_source(path) as source:
                processor.process(source)
        except OSError as e:
            logger.error("Cannot open %s: %s", path, e)
            return 1
        except SourceReadError as e:
            logger.error("Reading %s failed: %s", path, e)
            return 1

    stats = processor.stats
    logger.info(
        "%d lines, %d records decoded, %d dispatched, %d checksum failures, "
        "%d decode failures, %d ignored",
        stats.lines_read,
        stats.records_decoded,
        stats.records_dispatched,
        stats.checksum_failures,
        stats.decode_failures,
        stats.ignored_sentences,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
