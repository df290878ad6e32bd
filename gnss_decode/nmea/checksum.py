"""NMEA checksum calculation and verification.

The checksum is the XOR of every character between ``$`` and ``*``
(exclusive), written as two hex digits after the ``*``::

    $GPGSV,3,1,12,05,58,322,36,02,55,032,,26,50,173,,04,31,085,00*79
     ^--------------------- checksum content ---------------------^ ^^

The decoder transports the checksum token verbatim and only verifies it when
asked to (``SentenceDecoder(verify_checksum=True)``).
"""

__all__ = ["calculate_checksum", "split_checksum", "validate_checksum"]


def split_checksum(sentence: str) -> tuple[str, str] | None:
    """Separate the checksummed content from the provided checksum digits.

    Returns:
        ``(content, checksum_hex)``, or None if the ``$`` or ``*``
        delimiter is missing or fewer than two checksum digits follow ``*``.

    Example:
        >>> split_checksum("$GPZZZ,1,2,3*5A")
        ('GPZZZ,1,2,3', '5A')
    """
    if not sentence.startswith("$") or "*" not in sentence:
        return None

    end = sentence.index("*")
    provided = sentence[end + 1 : end + 3]
    if len(provided) != 2:
        return None

    return sentence[1:end], provided


def calculate_checksum(content: str) -> int:
    """XOR the character codes of ``content`` into a single byte (0-255)."""
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Return True if the sentence's ``*hh`` suffix matches its content.

    Trailing whitespace (``\\r\\n``) is ignored. A sentence with no
    checksum, a truncated checksum, or non-hex digits is invalid.

    Example:
        >>> validate_checksum("$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F")
        True
        >>> validate_checksum("$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*FF")
        False
    """
    parts = split_checksum(sentence.strip())
    if parts is None:
        return False

    content, provided = parts
    try:
        return calculate_checksum(content) == int(provided, 16)
    except ValueError:
        return False
