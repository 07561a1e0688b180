"""Tests for the Instant value type."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from epochctl.domain.instant import MAX_SECONDS, MIN_SECONDS, Instant


class TestInstant:
    def test_defaults_to_whole_seconds(self) -> None:
        assert Instant(seconds=10).nanos == 0

    def test_frozen(self) -> None:
        instant = Instant(seconds=1)
        with pytest.raises(AttributeError):
            instant.seconds = 2  # type: ignore[misc]

    @pytest.mark.parametrize("nanos", [-1, 1_000_000_000])
    def test_nanos_bounds(self, nanos: int) -> None:
        with pytest.raises(ValueError, match="nanos"):
            Instant(seconds=0, nanos=nanos)

    @pytest.mark.parametrize("seconds", [MAX_SECONDS + 1, MIN_SECONDS - 1])
    def test_seconds_bounds(self, seconds: int) -> None:
        with pytest.raises(ValueError, match="outside representable range"):
            Instant(seconds=seconds)

    def test_ordering(self) -> None:
        assert Instant(seconds=1) < Instant(seconds=1, nanos=1) < Instant(seconds=2)


class TestConversions:
    def test_from_millis(self) -> None:
        assert Instant.from_millis(1_700_000_000_123) == Instant(1_700_000_000, 123_000_000)

    def test_millis_property(self) -> None:
        assert Instant(seconds=-2, nanos=500_000_000).millis == -1500

    def test_from_datetime_normalizes_offset(self) -> None:
        dt = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
        assert Instant.from_datetime(dt) == Instant.from_datetime(datetime(2024, 1, 1, tzinfo=UTC))

    def test_from_datetime_keeps_microseconds(self) -> None:
        dt = datetime(1970, 1, 1, 0, 0, 1, 250_000, tzinfo=UTC)
        assert Instant.from_datetime(dt) == Instant(seconds=1, nanos=250_000_000)

    def test_to_datetime_utc(self) -> None:
        assert Instant(seconds=0).to_datetime() == datetime(1970, 1, 1, tzinfo=UTC)

    def test_to_datetime_extremes(self) -> None:
        assert Instant(seconds=MIN_SECONDS).to_datetime().year == 1
        assert Instant(seconds=MAX_SECONDS).to_datetime() == datetime(
            9999, 12, 31, 23, 59, 59, tzinfo=UTC
        )
