"""GSV sentence handler.

GSV (Satellites in View) has a variable number of fields. A fixed 4-token
header is followed by zero or more 4-token satellite groups:

    $GPGSV,3,1,12,05,58,322,36,02,55,032,,26,50,173,,04,31,085,00*79
    |      | | |  +----------+ +--------+ +--------+ +-------------+
    |      | | |   satellite 1  satellite 2  satellite 3   satellite 4
    |      | | +-- Satellites in view (3)
    |      | +-- Message index (2)
    |      +-- Total messages (1)
    +-- Type token (0)

Each group is (id, elevation in degrees, azimuth in degrees true, SNR in
dB). The SNR is empty when a satellite is tracked but not heard.

The checksum is the literal last token of the sentence, whatever the group
count. When the last satellite's SNR slot is that checksum-bearing token
(``00*79`` above), the slot belongs to the checksum and the SNR is reported
as absent.
"""

from gnss_decode.nmea.errors import MalformedSentenceError
from gnss_decode.nmea.fields import parse_float, parse_int, require_tokens
from gnss_decode.nmea.timestamps import Clock, utc_now
from gnss_decode.nmea.types import GSVRecord, Satellite

_HEADER_TOKEN_COUNT = 4
_GROUP_SIZE = 4


def _count_groups(tokens: list[str]) -> int:
    """Return the number of complete satellite groups after the header.

    Raises:
        MalformedSentenceError: If the trailing tokens do not divide into
            whole groups (a truncated satellite group).
    """
    group_count, remainder = divmod(len(tokens) - _HEADER_TOKEN_COUNT, _GROUP_SIZE)
    if remainder:
        raise MalformedSentenceError(
            f"GSV has {remainder} tokens left over after {group_count} satellite groups"
        )
    return group_count


def _decode_snr(token: str) -> float | None:
    if not token or "*" in token:
        return None
    return parse_float(token, "snr_db")


def _decode_satellite(tokens: list[str], offset: int) -> Satellite:
    return Satellite(
        id=parse_int(tokens[offset], "id"),
        elevation_degrees=parse_float(tokens[offset + 1], "elevation_degrees"),
        azimuth_degrees=parse_float(tokens[offset + 2], "azimuth_degrees"),
        snr_db=_decode_snr(tokens[offset + 3]),
    )


def decode_gsv(tokens: list[str], sentence: str, clock: Clock = utc_now) -> GSVRecord:
    """Build a ``GSVRecord`` from the tokens of a GSV sentence.

    Satellites are returned in the order they appear in the sentence. GSV
    carries no time of fix, so ``clock`` is never read.

    Raises:
        MalformedSentenceError: If the header is incomplete or the
            satellite fields are not a multiple of four.
        UnparsableNumberError: If a satellite id, elevation, azimuth, or
            non-empty SNR is not numeric.
    """
    require_tokens(tokens, _HEADER_TOKEN_COUNT, "GSV")
    group_count = _count_groups(tokens)

    satellites = tuple(
        _decode_satellite(tokens, _HEADER_TOKEN_COUNT + index * _GROUP_SIZE)
        for index in range(group_count)
    )

    return GSVRecord(
        sentence_type=tokens[0],
        total_messages=tokens[1],
        message_index=tokens[2],
        satellites_in_view=tokens[3],
        satellites=satellites,
        checksum=tokens[-1],
        raw_sentence=sentence,
    )
