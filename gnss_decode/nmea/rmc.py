"""RMC sentence handler.

RMC (Recommended Minimum Specific GNSS Data) carries position, speed,
track, and the only full UTC date among the supported sentences.

RMC Sentence Format:
    $GPRMC,180826.9,V,4043.79444,N,07359.60944,W,,,160614,013.0,W,N*19
           |        | |          | |           | |||      |     | |
           |        | |          | |           | |||      |     | +-- Checksum token (12)
           |        | |          | |           | |||      |     +-- Variation E/W (11)
           |        | |          | |           | |||      +-- Magnetic variation (10)
           |        | |          | |           | ||+-- UTC date ddmmyy (9)
           |        | |          | |           | |+-- Track angle, degrees true (8)
           |        | |          | |           | +-- Speed over ground, knots (7)
           |        | |          | |           +-- E/W (6)
           |        | |          | +-- Longitude (5)
           |        | |          +-- N/S (4)
           |        | +-- Latitude (3)
           |        +-- Status A=active, V=void (2)
           +-- UTC time hhmmss.ss (1)
"""

from gnss_decode.nmea.fields import require_tokens
from gnss_decode.nmea.timestamps import Clock, reconstruct_datetime, utc_now
from gnss_decode.nmea.types import RMCRecord

_MINIMUM_TOKEN_COUNT = 13


def decode_rmc(tokens: list[str], sentence: str, clock: Clock = utc_now) -> RMCRecord:
    """Build an ``RMCRecord`` from the tokens of an RMC sentence.

    Raises:
        MalformedSentenceError: If fewer than 13 tokens are present or the
            date/time tokens are out of range.
        UnparsableNumberError: If the date/time tokens are not numeric.
    """
    require_tokens(tokens, _MINIMUM_TOKEN_COUNT, "RMC")

    return RMCRecord(
        sentence_type=tokens[0],
        utc_time=tokens[1],
        status=tokens[2],
        latitude=tokens[3],
        latitude_direction=tokens[4],
        longitude=tokens[5],
        longitude_direction=tokens[6],
        speed=tokens[7],
        track=tokens[8],
        utc_date=tokens[9],
        magnetic_variation=tokens[10],
        variation_direction=tokens[11],
        checksum=tokens[12],
        utc_datetime=reconstruct_datetime(tokens[9], tokens[1], clock),
        raw_sentence=sentence,
    )
