"""Shared fixtures for decoder tests."""

from datetime import datetime, timezone

import pytest

from gnss_decode import SentenceDecoder

_FROZEN_NOW = datetime(2026, 10, 18, 9, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now() -> datetime:
    return _FROZEN_NOW


@pytest.fixture
def frozen_clock(frozen_now):
    return lambda: frozen_now


@pytest.fixture
def decoder(frozen_clock) -> SentenceDecoder:
    return SentenceDecoder(clock=frozen_clock)
