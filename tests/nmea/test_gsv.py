"""Tests for GSV sentence decoding."""

import pytest

from gnss_decode import (
    GSVRecord,
    MalformedSentenceError,
    Satellite,
    UnparsableNumberError,
)
from gnss_decode.nmea.gsv import decode_gsv

GSV_FOUR_SATELLITES = "$GPGSV,3,1,12,05,58,322,36,02,55,032,,26,50,173,,04,31,085,00*79"


class TestDecodeGSV:
    """Tests for GSV decoding through the sentence decoder."""

    def test_header_fields(self, decoder):
        result = decoder.sentence_to_record(GSV_FOUR_SATELLITES)
        assert isinstance(result, GSVRecord)
        assert result.sentence_type == "$GPGSV"
        assert result.total_messages == "3"
        assert result.message_index == "1"
        assert result.satellites_in_view == "12"
        assert result.raw_sentence == GSV_FOUR_SATELLITES

    def test_four_satellite_groups_in_order(self, decoder):
        result = decoder.sentence_to_record(GSV_FOUR_SATELLITES)
        assert len(result.satellites) == 4
        assert [satellite.id for satellite in result.satellites] == [5, 2, 26, 4]
        assert result.satellites[0] == Satellite(
            id=5, elevation_degrees=58.0, azimuth_degrees=322.0, snr_db=36.0
        )
        assert result.satellites[1].elevation_degrees == pytest.approx(55.0)
        assert result.satellites[1].azimuth_degrees == pytest.approx(32.0)

    def test_empty_snr_is_absent(self, decoder):
        result = decoder.sentence_to_record(GSV_FOUR_SATELLITES)
        assert result.satellites[1].snr_db is None
        assert result.satellites[2].snr_db is None

    def test_snr_sharing_checksum_token_is_absent(self, decoder):
        result = decoder.sentence_to_record(GSV_FOUR_SATELLITES)
        assert result.satellites[3].snr_db is None

    def test_checksum_is_literal_last_token(self, decoder):
        result = decoder.sentence_to_record(GSV_FOUR_SATELLITES)
        assert result.checksum == "00*79"

    def test_zero_snr_is_kept(self, decoder):
        result = decoder.sentence_to_record("$GPGSV,1,1,02,05,58,322,00,07,10,100,*4A")
        assert result.satellites[0].snr_db == 0.0
        assert result.satellites[0].snr_db is not None
        assert result.satellites[1].snr_db is None
        assert result.checksum == "*4A"

    def test_no_satellite_groups(self, decoder):
        result = decoder.sentence_to_record("$GPGSV,1,1,00*79")
        assert result.satellites == ()
        assert result.satellites_in_view == "00*79"
        assert result.checksum == "00*79"

    def test_partial_satellite_group_is_malformed(self, decoder):
        with pytest.raises(MalformedSentenceError):
            decoder.sentence_to_record("$GPGSV,3,1,12,05,58,322,36,02")

    def test_truncated_last_group_is_malformed(self, decoder):
        with pytest.raises(MalformedSentenceError):
            decoder.sentence_to_record("$GPGSV,3,1,12,05,58,322,36,02,55,032*79")

    def test_incomplete_header_is_malformed(self, decoder):
        with pytest.raises(MalformedSentenceError):
            decoder.sentence_to_record("$GPGSV,3,1")

    def test_non_numeric_elevation(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,01,05,high,322,36")
        assert exc_info.value.field == "elevation_degrees"
        assert exc_info.value.value == "high"

    def test_empty_azimuth_is_unparsable(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,02,05,58,,36,07,10,100,*4A")
        assert exc_info.value.field == "azimuth_degrees"

    def test_non_numeric_snr(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,02,05,58,322,ab,07,10,100,*4A")
        assert exc_info.value.field == "snr_db"

    def test_non_numeric_id(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,01,G5,58,322,*4A")
        assert exc_info.value.field == "id"

    def test_glonass_talker(self, decoder):
        result = decoder.sentence_to_record("$GLGSV,1,1,01,65,12,045,20*5C")
        assert isinstance(result, GSVRecord)
        assert result.satellites[0].id == 65
        assert result.satellites[0].snr_db is None

    def test_nan_elevation_is_unparsable(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,01,05,nan,inf,36")
        assert exc_info.value.field == "elevation_degrees"
        assert exc_info.value.value == "nan"

    def test_infinite_azimuth_is_unparsable(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,01,05,58,inf,36")
        assert exc_info.value.field == "azimuth_degrees"

    def test_signed_satellite_id_is_unparsable(self, decoder):
        with pytest.raises(UnparsableNumberError) as exc_info:
            decoder.sentence_to_record("$GPGSV,1,1,01,+5,58,322,36")
        assert exc_info.value.field == "id"

    def test_handler_shares_clock_signature_without_reading_it(self):
        def clock():
            raise AssertionError("GSV must not read the clock")

        result = decode_gsv(GSV_FOUR_SATELLITES.split(","), GSV_FOUR_SATELLITES, clock)
        assert len(result.satellites) == 4
