"""Tests for GPS date/time reconstruction."""

from datetime import datetime, timezone

import pytest

from gnss_decode import MalformedSentenceError, UnparsableNumberError
from gnss_decode.nmea import reconstruct_datetime


class TestReconstructDatetime:
    """Tests for reconstruct_datetime function."""

    def test_date_and_time(self, frozen_clock):
        result = reconstruct_datetime("160614", "180826.9", frozen_clock)
        assert result == datetime(2014, 6, 16, 18, 8, 26, tzinfo=timezone.utc)

    def test_result_is_utc(self, frozen_clock):
        result = reconstruct_datetime("160614", "180826", frozen_clock)
        assert result.tzinfo == timezone.utc
        assert result.utcoffset().total_seconds() == 0

    def test_fraction_is_discarded(self, frozen_clock):
        result = reconstruct_datetime("010100", "000000.99", frozen_clock)
        assert result == datetime(2000, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert result.microsecond == 0

    def test_month_is_one_based(self, frozen_clock):
        assert reconstruct_datetime("311299", "235959", frozen_clock).month == 12

    def test_two_digit_year_is_in_2000s(self, frozen_clock):
        assert reconstruct_datetime("010199", "120000", frozen_clock).year == 2099

    def test_missing_date_uses_clock_date(self, frozen_clock, frozen_now):
        result = reconstruct_datetime(None, "180826", frozen_clock)
        assert result.date() == frozen_now.date()
        assert (result.hour, result.minute, result.second) == (18, 8, 26)

    def test_false_date_uses_clock_date(self, frozen_clock, frozen_now):
        result = reconstruct_datetime("", "180826", frozen_clock)
        assert result.date() == frozen_now.date()

    def test_missing_time_uses_clock_time(self, frozen_clock):
        result = reconstruct_datetime("160614", None, frozen_clock)
        assert result == datetime(2014, 6, 16, 9, 30, 15, tzinfo=timezone.utc)

    def test_both_missing_truncates_clock_to_seconds(self, frozen_clock, frozen_now):
        result = reconstruct_datetime(None, None, frozen_clock)
        assert result == frozen_now.replace(microsecond=0)

    def test_clock_not_read_when_both_tokens_present(self):
        def failing_clock():
            raise AssertionError("clock should not be read")

        reconstruct_datetime("160614", "180826", failing_clock)

    def test_default_clock_is_current_utc(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        result = reconstruct_datetime(None, None)
        after = datetime.now(timezone.utc)
        assert before <= result <= after

    def test_non_numeric_time(self, frozen_clock):
        with pytest.raises(UnparsableNumberError) as exc_info:
            reconstruct_datetime("160614", "18xx26", frozen_clock)
        assert exc_info.value.field == "utc_time"

    def test_short_time_token(self, frozen_clock):
        with pytest.raises(UnparsableNumberError):
            reconstruct_datetime("160614", "1808", frozen_clock)

    def test_non_numeric_date(self, frozen_clock):
        with pytest.raises(UnparsableNumberError) as exc_info:
            reconstruct_datetime("16JU14", "180826", frozen_clock)
        assert exc_info.value.field == "utc_date"

    def test_invalid_hour(self, frozen_clock):
        with pytest.raises(MalformedSentenceError):
            reconstruct_datetime("160614", "250000", frozen_clock)

    def test_invalid_day(self, frozen_clock):
        with pytest.raises(MalformedSentenceError):
            reconstruct_datetime("310214", "120000", frozen_clock)

    def test_space_padded_time(self, frozen_clock):
        with pytest.raises(UnparsableNumberError) as exc_info:
            reconstruct_datetime("160614", " 23519.00", frozen_clock)
        assert exc_info.value.field == "utc_time"

    def test_signed_date_component(self, frozen_clock):
        with pytest.raises(UnparsableNumberError) as exc_info:
            reconstruct_datetime("+10614", "180826", frozen_clock)
        assert exc_info.value.field == "utc_date"
