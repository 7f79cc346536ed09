"""NMEA sentence tokenization.

A sentence on the wire looks like:

    $GPGLL,3723.02837,N,12159.39853,W,162254.00,A,A*7C
    ^^ ^  |                                        ^^
    |  |  +-- comma-separated fields                +-- checksum
    |  +-- sentence type code (GLL)
    +-- marker + talker ID (GP)

Only the trailing three letters of the address field select a decoder. The
talker ID in front of them is kept for information but does not affect
decoding.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from nmeadecode.nmea.checksum import (
    CHECKSUM_DELIMITER,
    find_start_marker,
    validate_checksum,
)
from nmeadecode.nmea.errors import ChecksumInvalidError, NMEAError

T = TypeVar("T")

_SENTENCE_TYPE_LENGTH = 3
_FIELD_SEPARATOR = ","


@dataclass(frozen=True)
class RawSentence:
    """A tokenized sentence, alive only while one line is decoded.

    Attributes:
        talker: Talker ID in front of the type code (e.g. "GP", "GN").
        sentence_type: Type code used for dispatch (e.g. "RMC").
        fields: Data fields after the address field, in wire order.
        checksum: The transmitted checksum byte.
    """

    talker: str
    sentence_type: str
    fields: tuple[str, ...]
    checksum: int

    def field(self, index: int) -> str:
        """Return field ``index``, or "" when the sentence is shorter.

        Receivers may drop trailing optional fields entirely, so a missing
        field reads the same as an empty one.
        """
        if index < len(self.fields):
            return self.fields[index]
        return ""


def tokenize_sentence(sentence: str) -> RawSentence:
    """Split a sentence into its talker, type code and fields.

    Strips surrounding whitespace, the start marker and the '*' checksum
    suffix. The checksum itself is not verified here.

    Args:
        sentence: Raw NMEA sentence string

    Returns:
        The tokenized sentence.

    Raises:
        ChecksumInvalidError: If the start marker, the '*' delimiter or a
            two-digit hex checksum is missing.

    Example:
        >>> tokenize_sentence("$GPAAM,A,A,0.10,N,WPTNME*32")
        RawSentence(talker='GP', sentence_type='AAM', fields=('A', 'A', '0.10', 'N', 'WPTNME'), checksum=50)
    """
    sentence = sentence.strip()

    start = find_start_marker(sentence)
    if start < 0:
        raise ChecksumInvalidError("missing sentence start marker")

    end = sentence.find(CHECKSUM_DELIMITER, start + 1)
    if end < 0:
        raise ChecksumInvalidError("missing checksum delimiter")

    try:
        checksum = int(sentence[end + 1 : end + 3], 16)
    except ValueError as exc:
        raise ChecksumInvalidError("malformed checksum") from exc

    address, *fields = sentence[start + 1 : end].split(_FIELD_SEPARATOR)

    return RawSentence(
        talker=address[:-_SENTENCE_TYPE_LENGTH],
        sentence_type=address[-_SENTENCE_TYPE_LENGTH:],
        fields=tuple(fields),
        checksum=checksum,
    )


def read_sentence(sentence: str) -> RawSentence:
    """Validate the checksum of a sentence, then tokenize it.

    Raises:
        ChecksumInvalidError: If the checksum does not match or the sentence
            is structurally malformed.
    """
    if not validate_checksum(sentence):
        raise ChecksumInvalidError(f"invalid checksum: {sentence.strip()!r}")
    return tokenize_sentence(sentence)


def parse_sentence_as(
    sentence: str,
    sentence_type: str,
    decoder: Callable[[RawSentence], T],
) -> T | None:
    """Parse a single sentence of a known type into structured data.

    This is the shared implementation of the ``parse_xxx`` entry points.
    It performs:
    1. Whitespace stripping (handles \\r\\n line endings)
    2. Checksum validation
    3. Tokenization
    4. Sentence type validation (any talker ID is accepted)
    5. Field decoding

    Returns:
        The decoded record, or None if the checksum is invalid, the sentence
        has a different type, or a field is malformed.
    """
    try:
        raw = read_sentence(sentence)
        if raw.sentence_type != sentence_type:
            return None
        return decoder(raw)
    except NMEAError:
        return None
