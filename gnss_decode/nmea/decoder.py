"""Sentence decoder: type dispatch and batch decoding.

The decoder splits a raw sentence on commas, takes the last three
characters of the type token (``"$GPRMC"`` -> ``"rmc"``) and hands the
tokens to the matching handler. Sentence types without a handler decode to
a ``GenericRecord``.

Two consumption patterns are supported:

Single sentence (errors are raised)::

    record = parse("$GPRMC,180826.9,V,4043.79444,N,07359.60944,W,,,160614,013.0,W,N*19")

Sequence of sentences (errors are reported per sentence)::

    with open("track.nmea") as lines:
        for result in parse(line.rstrip("\\r\\n") for line in lines):
            if result.ok:
                process(result.record)

A decoder holds only immutable settings and may be shared between threads.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass

from gnss_decode.nmea.checksum import validate_checksum
from gnss_decode.nmea.errors import (
    ChecksumMismatchError,
    InvalidInputError,
    NMEADecodeError,
)
from gnss_decode.nmea.fields import split_sentence
from gnss_decode.nmea.generic import decode_generic
from gnss_decode.nmea.gga import decode_gga
from gnss_decode.nmea.gsv import decode_gsv
from gnss_decode.nmea.rmc import decode_rmc
from gnss_decode.nmea.timestamps import Clock, utc_now
from gnss_decode.nmea.types import DecodedRecord

__all__ = [
    "SENTENCE_TYPES",
    "DecodeResult",
    "SentenceDecoder",
    "parse",
    "sentence_to_record",
]

logger = logging.getLogger(__name__)

_Handler = Callable[[list[str], str, Clock], DecodedRecord]

_HANDLERS: dict[str, _Handler] = {
    "rmc": decode_rmc,
    "gga": decode_gga,
    "gsv": decode_gsv,
}

# Sentence type keys with a dedicated handler
SENTENCE_TYPES = tuple(_HANDLERS)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one element of a sentence sequence.

    Exactly one of ``record`` and ``error`` is set.

    Attributes:
        sentence: The input element as given.
        record: The decoded record, or None if decoding failed.
        error: The decoding error, or None on success.
    """

    sentence: object
    record: DecodedRecord | None = None
    error: NMEADecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SentenceDecoder:
    """Decode NMEA 0183 sentences into typed records.

    Args:
        verify_checksum: Reject sentences whose ``*hh`` checksum does not
            match their content (default: ``False``; the checksum token is
            otherwise transported verbatim).
        clock: Returns the current UTC time. Used to fill in the date of
            GGA sentences and any empty RMC date/time token.
    """

    def __init__(
        self,
        verify_checksum: bool = False,
        clock: Clock = utc_now,
    ) -> None:
        self._verify_checksum = verify_checksum
        self._clock = clock

    def sentence_to_record(self, sentence: str) -> DecodedRecord:
        """Decode one raw sentence.

        Raises:
            MalformedSentenceError: If the sentence is empty, lacks the
                ``$`` type marker, or is too short for its type.
            UnparsableNumberError: If a numeric field cannot be parsed.
            UnrecognizedFixTypeError: If a GGA fix type is out of range.
            ChecksumMismatchError: If checksum verification is enabled and
                fails.
        """
        tokens = split_sentence(sentence)

        if self._verify_checksum and not validate_checksum(sentence):
            raise ChecksumMismatchError(f"Checksum mismatch: {sentence!r}")

        type_key = tokens[0][-3:].lower()
        handler = _HANDLERS.get(type_key)
        logger.debug("Decoding %s sentence with %d tokens", type_key, len(tokens))

        if handler is None:
            return decode_generic(tokens, sentence)
        return handler(tokens, sentence, self._clock)

    def _decode_one(self, sentence: object) -> DecodeResult:
        if not isinstance(sentence, str):
            error = InvalidInputError(
                f"Expected a sentence string, got {type(sentence).__name__}"
            )
            return DecodeResult(sentence=sentence, error=error)
        try:
            return DecodeResult(sentence=sentence, record=self.sentence_to_record(sentence))
        except NMEADecodeError as exc:
            logger.warning("Skipping undecodable sentence %r: %s", sentence, exc)
            return DecodeResult(sentence=sentence, error=exc)

    def _decode_each(self, sentences: Iterable[object]) -> Iterator[DecodeResult]:
        for sentence in sentences:
            yield self._decode_one(sentence)

    def parse(
        self, data: str | Iterable[str]
    ) -> DecodedRecord | Iterator[DecodeResult]:
        """Decode a sentence, or lazily decode a sequence of sentences.

        Args:
            data: A single sentence, or any iterable of sentences (list,
                tuple, generator, lines of a text file).

        Returns:
            For a single sentence, its ``DecodedRecord``. For an iterable,
            a single-pass iterator of ``DecodeResult`` in input order; a
            failing element yields a result carrying the error and does
            not stop the iteration.

        Raises:
            InvalidInputError: If ``data`` is neither a string nor an
                iterable of sentences (bytes and mappings are rejected).
            NMEADecodeError: For a single sentence that cannot be decoded.
        """
        if isinstance(data, str):
            return self.sentence_to_record(data)
        if isinstance(data, (bytes, bytearray, Mapping)) or not isinstance(data, Iterable):
            raise InvalidInputError(
                f"Expected a sentence or a sequence of sentences, got {type(data).__name__}"
            )
        return self._decode_each(data)


_default_decoder = SentenceDecoder()


def sentence_to_record(sentence: str) -> DecodedRecord:
    """Decode one raw sentence with the default decoder."""
    return _default_decoder.sentence_to_record(sentence)


def parse(data: str | Iterable[str]) -> DecodedRecord | Iterator[DecodeResult]:
    """Decode a sentence or a sequence of sentences with the default decoder.

    See ``SentenceDecoder.parse``.
    """
    return _default_decoder.parse(data)
