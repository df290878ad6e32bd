"""Fallback handler for sentence types without a dedicated decoder."""

from gnss_decode.nmea.types import GenericRecord


def decode_generic(tokens: list[str], sentence: str) -> GenericRecord:
    """Keep every token, keyed by its position, since its meaning is unknown.

    Example:
        >>> dict(decode_generic(["$GPZZZ", "1", "2"], "$GPZZZ,1,2").fields)
        {0: '$GPZZZ', 1: '1', 2: '2'}
    """
    return GenericRecord(
        sentence_type=tokens[0],
        fields=dict(enumerate(tokens)),
        raw_sentence=sentence,
    )
