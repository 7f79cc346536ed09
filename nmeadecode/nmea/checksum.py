"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the start marker
('$', or '!' for encapsulated sentences such as AIS) and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74
    ^                         checksum content                            ^^
    start                                                  checksum (0x74 = 116)
"""

import string

START_MARKERS = ("$", "!")
CHECKSUM_DELIMITER = "*"


def find_start_marker(sentence: str) -> int:
    """Return the index of the first '$' or '!' in the sentence, or -1."""
    positions = [sentence.find(marker) for marker in START_MARKERS]
    found = [position for position in positions if position >= 0]
    return min(found) if found else -1


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    NMEA sentences follow the format: <marker><content>*<checksum>
    This function separates these components for validation.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPZDA,...*63")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' / '!' start marker
        - Missing '*' checksum delimiter after the marker
        - Checksum is not exactly 2 hexadecimal characters

    Example:
        >>> _extract_checksum_parts("$GPZDA,162254.00*7F")
        ('GPZDA,162254.00', '7F')
    """
    start = find_start_marker(sentence)
    if start < 0:
        return None

    end = sentence.find(CHECKSUM_DELIMITER, start + 1)
    if end < 0:
        return None

    content = sentence[start + 1 : end]
    provided = sentence[end + 1 : end + 3]

    if len(provided) != 2:
        return None

    # int(..., 16) would also accept signs and whitespace
    if not all(character in string.hexdigits for character in provided):
        return None

    return content, provided


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content. The checksum of an empty content string is 0.

    Args:
        content: The string between the start marker and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPAAM,A,A,0.10,N,WPTNME")
        50
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between the start marker and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided 2-digit hex checksum

    Args:
        sentence: Complete NMEA sentence including marker, '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPAAM,A,A,0.10,N,WPTNME*32")
        True
        >>> validate_checksum("$GPAAM,A,A,0.10,N,WPTNME*33")  # wrong checksum
        False
        >>> validate_checksum("$*00")  # nothing to XOR
        True
    """
    sentence = sentence.strip()

    parts = _extract_checksum_parts(sentence)
    if parts is None:
        return False

    content, provided = parts
    return calculate_checksum(content) == int(provided, 16)
