"""Decoding of NMEA 0183 GNSS receiver sentences into structured records."""

from gnss_decode.nmea import (
    DecodedRecord,
    DecodeResult,
    GenericRecord,
    GGARecord,
    GSVRecord,
    InvalidInputError,
    MalformedSentenceError,
    NMEADecodeError,
    RMCRecord,
    Satellite,
    SentenceDecoder,
    UnparsableNumberError,
    UnrecognizedFixTypeError,
    parse,
    sentence_to_record,
    validate_checksum,
)

__all__ = [
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
    "parse",
    "sentence_to_record",
    "validate_checksum",
]
