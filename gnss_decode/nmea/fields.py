"""NMEA field parsing utilities.

Sentences are split on commas with no trimming and no quoting rules; NMEA
fields are never quoted. An empty field (two consecutive commas) means
"no data".

Two families of helpers live here:

* Strict parsers (``parse_int``, ``parse_float``) used for fields the
  decoder must interpret. They raise ``UnparsableNumberError``.
* Lenient parsers (``parse_*_field``, ``convert_to_decimal_degrees``) used
  by record properties. They return None for empty or garbled input so that
  consumers can tell "no data" from "measured zero".
"""

import re

from gnss_decode.nmea.errors import MalformedSentenceError, UnparsableNumberError

__all__ = [
    "convert_to_decimal_degrees",
    "parse_float",
    "parse_float_field",
    "parse_int",
    "parse_int_field",
    "require_tokens",
    "split_sentence",
]

# "$" followed by at least the 3-character sentence type
_MINIMUM_TYPE_TOKEN_LENGTH = 4

_DECIMAL_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def split_sentence(sentence: str) -> list[str]:
    """Split a raw sentence into its comma-delimited tokens.

    Index 0 is always the type token (``"$GPRMC"``). The checksum suffix is
    not separated from the last field.

    Raises:
        MalformedSentenceError: If the sentence is empty or its first token
            is not ``$`` followed by a talker ID and sentence type.

    Example:
        >>> split_sentence("$GPZZZ,1,,3*5A")
        ['$GPZZZ', '1', '', '3*5A']
    """
    if not sentence:
        raise MalformedSentenceError("Empty sentence")

    tokens = sentence.split(",")
    type_token = tokens[0]
    if not type_token.startswith("$"):
        raise MalformedSentenceError(f"Missing '$' type marker: {type_token!r}")
    if len(type_token) < _MINIMUM_TYPE_TOKEN_LENGTH:
        raise MalformedSentenceError(f"Sentence type token too short: {type_token!r}")
    return tokens


def require_tokens(tokens: list[str], minimum: int, sentence_type: str) -> None:
    """Fail with ``MalformedSentenceError`` unless ``tokens`` has ``minimum`` entries."""
    if len(tokens) < minimum:
        raise MalformedSentenceError(
            f"{sentence_type} needs at least {minimum} fields, got {len(tokens)}"
        )


def parse_int(value: str, field: str) -> int:
    """Parse a mandatory unsigned integer field.

    Only ASCII digits are accepted. Signs, whitespace, underscores and
    non-ASCII digits, all of which ``int()`` tolerates, are rejected.

    Raises:
        UnparsableNumberError: If ``value`` is empty or not an integer.
    """
    if not (value.isascii() and value.isdigit()):
        raise UnparsableNumberError(field, value)
    return int(value)


def parse_float(value: str, field: str) -> float:
    """Parse a mandatory decimal field such as ``"-12"`` or ``"058.25"``.

    Exponents, ``nan``/``inf`` and surrounding whitespace are rejected.

    Raises:
        UnparsableNumberError: If ``value`` is empty or not a decimal number.
    """
    if _DECIMAL_PATTERN.fullmatch(value) is None:
        raise UnparsableNumberError(field, value)
    return float(value)


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")
        None
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _parse_coordinate_parts(value: str) -> tuple[int, float] | None:
    """Split a ``DDDMM.MMMM`` coordinate into degrees and decimal minutes.

    The two digits before the decimal point are always minutes.

    Example:
        >>> _parse_coordinate_parts("4043.79444")
        (40, 43.79444)
    """
    try:
        dot_position = value.index(".")
        degrees = int(value[: dot_position - 2])
        minutes = float(value[dot_position - 2 :])
        return degrees, minutes
    except (ValueError, IndexError):
        return None


def convert_to_decimal_degrees(value: str, direction: str) -> float | None:
    """Convert an NMEA coordinate and hemisphere to signed decimal degrees.

    North and East are positive, South and West negative.

    Returns:
        Decimal degrees, or None if either field is empty or the
        coordinate cannot be parsed.

    Example:
        >>> convert_to_decimal_degrees("07359.60944", "W")
        -73.993490...
    """
    if not value or not direction:
        return None

    parts = _parse_coordinate_parts(value)
    if parts is None:
        return None

    degrees, minutes = parts
    decimal_degrees = degrees + minutes / 60.0

    if direction in ("S", "W"):
        return -decimal_degrees

    return decimal_degrees
