"""Exceptions raised while decoding NMEA sentences.

Every decoding failure is local to a single sentence. All exceptions derive
from ``NMEADecodeError`` so a caller can catch the whole family at once, and
from ``ValueError`` so generic "bad value" handlers keep working.

Hierarchy::

    NMEADecodeError (ValueError)
    +-- InvalidInputError (also TypeError)
    +-- MalformedSentenceError
    +-- UnrecognizedFixTypeError
    +-- UnparsableNumberError
    +-- ChecksumMismatchError
"""

__all__ = [
    "ChecksumMismatchError",
    "InvalidInputError",
    "MalformedSentenceError",
    "NMEADecodeError",
    "UnparsableNumberError",
    "UnrecognizedFixTypeError",
]


class NMEADecodeError(ValueError):
    """Base class for all sentence decoding errors."""

    kind = "DecodeError"


class InvalidInputError(NMEADecodeError, TypeError):
    """The decoder was given something other than a sentence or a sequence of sentences."""

    kind = "InvalidInput"


class MalformedSentenceError(NMEADecodeError):
    """The sentence is structurally broken.

    Raised for an empty line, a missing ``$`` marker, fewer tokens than the
    dispatched handler needs, a partial GSV satellite group, or date/time
    tokens that do not describe a real calendar instant.
    """

    kind = "MalformedSentence"


class UnrecognizedFixTypeError(NMEADecodeError):
    """The GGA fix type is a number outside the known range."""

    kind = "UnrecognizedFixType"

    def __init__(self, value: int) -> None:
        super().__init__(f"Unrecognized GGA fix type: {value}")
        self.value = value


class UnparsableNumberError(NMEADecodeError):
    """A field that must be numeric could not be parsed."""

    kind = "UnparsableNumber"

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Field {field!r} is not a number: {value!r}")
        self.field = field
        self.value = value


class ChecksumMismatchError(NMEADecodeError):
    """The sentence failed XOR checksum verification."""

    kind = "ChecksumMismatch"
