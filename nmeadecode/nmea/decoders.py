"""Sentence type dispatch table.

Maps each supported three-letter type code to the function decoding it.
Adding a sentence type means adding a record, a decoder and an entry here;
the processing loop does not change.
"""

from collections.abc import Callable

from nmeadecode.nmea.aam import decode_aam
from nmeadecode.nmea.gga import decode_gga
from nmeadecode.nmea.gll import decode_gll
from nmeadecode.nmea.gsa import decode_gsa
from nmeadecode.nmea.gst import decode_gst
from nmeadecode.nmea.gsv import decode_gsv
from nmeadecode.nmea.rmc import decode_rmc
from nmeadecode.nmea.sentence import RawSentence
from nmeadecode.nmea.types import MARKER_RECORDS, NMEARecord
from nmeadecode.nmea.vtg import decode_vtg
from nmeadecode.nmea.zda import decode_zda

Decoder = Callable[[RawSentence], NMEARecord]


def _marker_decoder(record_type: type[NMEARecord]) -> Decoder:
    def decode(_sentence: RawSentence) -> NMEARecord:
        return record_type()

    return decode


SENTENCE_DECODERS: dict[str, Decoder] = {
    "AAM": decode_aam,
    "GGA": decode_gga,
    "GLL": decode_gll,
    "GSA": decode_gsa,
    "GST": decode_gst,
    "GSV": decode_gsv,
    "RMC": decode_rmc,
    "VTG": decode_vtg,
    "ZDA": decode_zda,
}
SENTENCE_DECODERS.update(
    (record_type.sentence_type, _marker_decoder(record_type))
    for record_type in MARKER_RECORDS
)

SUPPORTED_SENTENCE_TYPES = frozenset(SENTENCE_DECODERS)


def decode_sentence(sentence: RawSentence) -> NMEARecord | None:
    """Decode a tokenized sentence with the decoder for its type code.

    Returns:
        The decoded record, or None if the type code is not supported.
        Unknown types are not an error.

    Raises:
        FieldDecodeError: If a non-empty field of a supported sentence is
            malformed.
    """
    decoder = SENTENCE_DECODERS.get(sentence.sentence_type)
    if decoder is None:
        return None
    return decoder(sentence)
