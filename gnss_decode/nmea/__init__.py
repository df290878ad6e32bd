"""NMEA 0183 decoder for RMC, GGA, and GSV sentences."""

from gnss_decode.nmea.checksum import calculate_checksum, validate_checksum
from gnss_decode.nmea.decoder import (
    SENTENCE_TYPES,
    DecodeResult,
    SentenceDecoder,
    parse,
    sentence_to_record,
)
from gnss_decode.nmea.errors import (
    ChecksumMismatchError,
    InvalidInputError,
    MalformedSentenceError,
    NMEADecodeError,
    UnparsableNumberError,
    UnrecognizedFixTypeError,
)
from gnss_decode.nmea.timestamps import reconstruct_datetime
from gnss_decode.nmea.types import (
    DecodedRecord,
    GenericRecord,
    GGARecord,
    GSVRecord,
    RMCRecord,
    Satellite,
)

__all__ = [
    "SENTENCE_TYPES",
    "ChecksumMismatchError",
    "DecodeResult",
    "DecodedRecord",
    "GGARecord",
    "GSVRecord",
    "GenericRecord",
    "InvalidInputError",
    "MalformedSentenceError",
    "NMEADecodeError",
    "RMCRecord",
    "Satellite",
    "SentenceDecoder",
    "UnparsableNumberError",
    "UnrecognizedFixTypeError",
    "calculate_checksum",
    "parse",
    "reconstruct_datetime",
    "sentence_to_record",
    "validate_checksum",
]
