"""Instant: an absolute point in time, normalized to UTC.

Stored as whole seconds since the unix epoch plus a nanosecond remainder
in ``[0, 10**9)``.  Seconds use floor semantics, so ``-0.5s`` is
``Instant(seconds=-1, nanos=500_000_000)``.

INVARIANT: ``MIN_SECONDS <= seconds <= MAX_SECONDS`` (years 0001..9999).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z
MIN_SECONDS = -62_135_596_800
MAX_SECONDS = 253_402_300_799


@dataclass(frozen=True, order=True)
class Instant:
    """Absolute time with optional sub-second precision."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            msg = f"nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}"
            raise ValueError(msg)
        if not in_range(self.seconds):
            msg = f"seconds {self.seconds} outside representable range"
            raise ValueError(msg)

    @classmethod
    def from_millis(cls, millis: int) -> Instant:
        seconds, rem = divmod(millis, 1000)
        return cls(seconds=seconds, nanos=rem * NANOS_PER_MILLI)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build an Instant from an aware datetime (microsecond precision)."""
        delta = dt.astimezone(UTC) - EPOCH
        seconds = delta.days * 86_400 + delta.seconds
        return cls(seconds=seconds, nanos=delta.microseconds * 1000)

    @property
    def millis(self) -> int:
        return self.seconds * 1000 + self.nanos // NANOS_PER_MILLI

    def to_datetime(self, tz: tzinfo | None = UTC) -> datetime:
        """Whole-second datetime for this instant.

        ``tz=None`` converts to the host's local zone.
        """
        dt = EPOCH + timedelta(seconds=self.seconds)
        if tz is UTC:
            return dt
        return dt.astimezone(tz)


def in_range(seconds: int) -> bool:
    return MIN_SECONDS <= seconds <= MAX_SECONDS
