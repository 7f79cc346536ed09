"""Exceptions raised while decoding NMEA 0183 input.

Only ``SourceReadError`` is fatal to a processing loop. The other errors are
contained to the line that produced them: the line is dropped and decoding
continues with the next one.
"""


class NMEAError(Exception):
    """Base class for all NMEA decoding errors."""


class ChecksumInvalidError(NMEAError):
    """The sentence is structurally malformed or its checksum does not match."""


class FieldDecodeError(NMEAError):
    """A non-empty field could not be parsed according to its grammar.

    Attributes:
        value: The raw field text that failed to parse.
    """

    def __init__(self, message: str, value: str = "") -> None:
        super().__init__(message)
        self.value = value


class SourceReadError(NMEAError):
    """The underlying line source failed while it was being read."""
