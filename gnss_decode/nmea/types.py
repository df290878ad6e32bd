"""Record types produced by the sentence decoder.

Design Decisions:
    1. Verbatim text fields: positional fields are stored exactly as they
       appear in the sentence (empty string for an empty field). Consumers
       that need numbers use the derived properties, which return None
       instead of raising when a field is empty or garbled.

    2. Strict fields are typed: the fields the decoder itself must
       interpret (GSV satellite numbers, GGA fix type, the reconstructed
       UTC datetime) are parsed eagerly, and a bad value fails the whole
       sentence.

    3. Frozen dataclasses: a record is produced once per sentence and is
       never mutated afterwards.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from gnss_decode.nmea.fields import (
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
)

__all__ = [
    "DecodedRecord",
    "GGARecord",
    "GSVRecord",
    "GenericRecord",
    "RMCRecord",
    "Satellite",
]


@dataclass(frozen=True)
class RMCRecord:
    """Decoded RMC (Recommended Minimum) sentence.

    Example sentence::

        $GPRMC,180826.9,V,4043.79444,N,07359.60944,W,,,160614,013.0,W,N*19

    Attributes:
        sentence_type: Full first token, e.g. ``"$GPRMC"``.
        utc_time: Time of fix, ``hhmmss[.ss]``.
        status: ``"A"`` (active) or ``"V"`` (void).
        latitude: Latitude in ``ddmm.mmmm`` form.
        latitude_direction: ``"N"`` or ``"S"``.
        longitude: Longitude in ``dddmm.mmmm`` form.
        longitude_direction: ``"E"`` or ``"W"``.
        speed: Speed over ground in knots.
        track: Track angle in degrees true.
        utc_date: Date of fix, ``ddmmyy``.
        magnetic_variation: Magnetic variation in degrees.
        variation_direction: ``"E"`` or ``"W"``.
        checksum: Last comma-delimited token, transported verbatim.
        utc_datetime: ``utc_date`` and ``utc_time`` combined, in UTC.
        raw_sentence: The input line, unmodified.
    """

    sentence_type: str
    utc_time: str
    status: str
    latitude: str
    latitude_direction: str
    longitude: str
    longitude_direction: str
    speed: str
    track: str
    utc_date: str
    magnetic_variation: str
    variation_direction: str
    checksum: str
    utc_datetime: datetime
    raw_sentence: str

    @property
    def latitude_degrees(self) -> float | None:
        return convert_to_decimal_degrees(self.latitude, self.latitude_direction)

    @property
    def longitude_degrees(self) -> float | None:
        return convert_to_decimal_degrees(self.longitude, self.longitude_direction)

    @property
    def speed_knots(self) -> float | None:
        return parse_float_field(self.speed)

    @property
    def track_degrees(self) -> float | None:
        return parse_float_field(self.track)

    @property
    def valid(self) -> bool:
        """True when the receiver flagged the fix as active."""
        return self.status == "A"


@dataclass(frozen=True)
class GGARecord:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    GGA carries no date, so ``utc_datetime`` combines the sentence's
    time-of-day with the calendar date at the moment of decoding.

    Attributes:
        fix_type: ``"none"``, ``"fix"`` or ``"delta"`` (differential).
        differential_reference_station: Token 14 verbatim. On most
            receivers this token also carries the ``*hh`` checksum.
    """

    sentence_type: str
    utc_datetime: datetime
    latitude: str
    latitude_pole: str
    longitude: str
    longitude_pole: str
    fix_type: str
    num_satellites: str
    horizontal_dilution: str
    altitude: str
    altitude_unit: str
    geoidal_separation: str
    geoidal_separation_unit: str
    differential_age: str
    differential_reference_station: str
    raw_sentence: str

    @property
    def latitude_degrees(self) -> float | None:
        return convert_to_decimal_degrees(self.latitude, self.latitude_pole)

    @property
    def longitude_degrees(self) -> float | None:
        return convert_to_decimal_degrees(self.longitude, self.longitude_pole)

    @property
    def satellite_count(self) -> int | None:
        return parse_int_field(self.num_satellites)

    @property
    def hdop(self) -> float | None:
        return parse_float_field(self.horizontal_dilution)

    @property
    def altitude_meters(self) -> float | None:
        return parse_float_field(self.altitude)


@dataclass(frozen=True)
class Satellite:
    """One satellite group from a GSV sentence.

    ``snr_db`` is None when the receiver tracks the satellite but reports no
    signal for it. Zero is a real reading and is kept as ``0.0``.
    """

    id: int
    elevation_degrees: float
    azimuth_degrees: float
    snr_db: float | None


@dataclass(frozen=True)
class GSVRecord:
    """Decoded GSV (Satellites in View) sentence.

    A full satellite list may be split across several GSV sentences;
    ``total_messages`` and ``message_index`` locate this one in the series.
    """

    sentence_type: str
    total_messages: str
    message_index: str
    satellites_in_view: str
    satellites: tuple[Satellite, ...]
    checksum: str
    raw_sentence: str


@dataclass(frozen=True)
class GenericRecord:
    """A sentence of a type the decoder has no handler for.

    ``fields`` maps every token's 0-based position to its text, including
    the type token at index 0. The mapping is a read-only view, so the
    record cannot be altered through it. It is also not hashable, and
    neither is the record.
    """

    sentence_type: str
    fields: Mapping[int, str] = field(default_factory=dict)
    raw_sentence: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


DecodedRecord = RMCRecord | GGARecord | GSVRecord | GenericRecord
