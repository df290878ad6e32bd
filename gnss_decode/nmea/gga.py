"""GGA sentence handler.

GGA (Global Positioning System Fix Data) provides the position fix,
fix quality, satellite count, and altitude.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |    | ||
           |         |        | |         | | |  |   |     | |    | |+-- Reference station id (14)
           |         |        | |         | | |  |   |     | |    | +-- Differential age (13)
           |         |        | |         | | |  |   |     | |    +-- Separation unit (12)
           |         |        | |         | | |  |   |     | +-- Geoidal separation (11)
           |         |        | |         | | |  |   |     +-- Altitude unit (10)
           |         |        | |         | | |  |   +-- Altitude (9)
           |         |        | |         | | |  +-- Horizontal dilution (8)
           |         |        | |         | | +-- Number of satellites (7)
           |         |        | |         | +-- Fix type (6)
           |         |        | |         +-- E/W (5)
           |         |        | +-- Longitude (4)
           |         |        +-- N/S (3)
           |         +-- Latitude (2)
           +-- UTC time hhmmss.ss (1)

Fix Types:
    0 = none  (no fix)
    1 = fix   (GPS fix)
    2 = delta (differential GPS fix)

GGA has no date field, so the decoded datetime always falls on the current
UTC calendar date.
"""

from gnss_decode.nmea.errors import UnrecognizedFixTypeError
from gnss_decode.nmea.fields import parse_int, require_tokens
from gnss_decode.nmea.timestamps import Clock, reconstruct_datetime, utc_now
from gnss_decode.nmea.types import GGARecord

_MINIMUM_TOKEN_COUNT = 15

_FIX_TYPES: dict[int, str] = {
    0: "none",
    1: "fix",
    2: "delta",
}


def _decode_fix_type(token: str) -> str:
    """Map the numeric fix type onto its name.

    Raises:
        UnparsableNumberError: If ``token`` is not an integer.
        UnrecognizedFixTypeError: If the integer is outside 0-2.
    """
    value = parse_int(token, "fix_type")
    if value not in _FIX_TYPES:
        raise UnrecognizedFixTypeError(value)
    return _FIX_TYPES[value]


def decode_gga(tokens: list[str], sentence: str, clock: Clock = utc_now) -> GGARecord:
    """Build a ``GGARecord`` from the tokens of a GGA sentence.

    Raises:
        MalformedSentenceError: If fewer than 15 tokens are present or the
            time token is out of range.
        UnparsableNumberError: If the fix type or time token is not numeric.
        UnrecognizedFixTypeError: If the fix type is outside 0-2.
    """
    require_tokens(tokens, _MINIMUM_TOKEN_COUNT, "GGA")

    return GGARecord(
        sentence_type=tokens[0],
        utc_datetime=reconstruct_datetime(None, tokens[1], clock),
        latitude=tokens[2],
        latitude_pole=tokens[3],
        longitude=tokens[4],
        longitude_pole=tokens[5],
        fix_type=_decode_fix_type(tokens[6]),
        num_satellites=tokens[7],
        horizontal_dilution=tokens[8],
        altitude=tokens[9],
        altitude_unit=tokens[10],
        geoidal_separation=tokens[11],
        geoidal_separation_unit=tokens[12],
        differential_age=tokens[13],
        differential_reference_station=tokens[14],
        raw_sentence=sentence,
    )
