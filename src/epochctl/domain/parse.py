"""Parser: turn a classified raw string into an Instant.

Numeric input is parsed as an integer count of seconds or milliseconds.
Formatted input follows ``YYYY/MM/DD HH:MM:SS`` positionally: four-digit
year, 1-2 digit month and day, 1-2 digit hour, minute and second.  It is
read as UTC unless the caller asks for the host's local zone.
"""

from __future__ import annotations

import calendar
import logging
import re
from datetime import UTC, datetime

from epochctl.domain.errors import (
    AmbiguousLocalTimeError,
    InvalidDateComponentError,
    NumericOverflowError,
    ParseError,
)
from epochctl.domain.instant import Instant, in_range
from epochctl.domain.types import InputKind, TimeZoneChoice

logger = logging.getLogger(__name__)

EXPECTED_FORMAT = "YYYY/MM/DD HH:MM:SS"

FORMATTED_PATTERN = re.compile(
    r"^(?P<year>\d{4})/(?P<month>\d{1,2})/(?P<day>\d{1,2})"
    r" (?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})$",
    re.ASCII,
)

# Wider than any in-range millisecond value; longer literals overflow outright.
_MAX_NUMERIC_DIGITS = 19

_CLOCK_LIMITS: tuple[tuple[str, int], ...] = (
    ("hour", 23),
    ("minute", 59),
    ("second", 59),
)


def parse_input(
    raw: str,
    kind: InputKind,
    *,
    input_tz: TimeZoneChoice = TimeZoneChoice.UTC,
) -> Instant:
    """Parse *raw* according to *kind*.

    Raises:
        ParseError: Malformed literal, or one of its subclasses
            (NumericOverflowError, InvalidDateComponentError,
            AmbiguousLocalTimeError).
    """
    text = raw.strip()
    if kind is InputKind.FORMATTED:
        return parse_formatted(text, input_tz=input_tz)
    return parse_timestamp(text, millis=kind is InputKind.UNIX_MILLIS)


def parse_timestamp(text: str, *, millis: bool = False) -> Instant:
    """Parse a signed decimal integer as unix seconds or milliseconds."""
    digits = text.lstrip("+-")
    if not (digits.isascii() and digits.isdigit()) or len(text) - len(digits) > 1:
        msg = f"Invalid unix timestamp {text!r}: expected an integer"
        raise ParseError(msg)
    if len(digits.lstrip("0")) > _MAX_NUMERIC_DIGITS:
        raise NumericOverflowError(_overflow_message(text))

    value = int(text)
    seconds = value // 1000 if millis else value
    if not in_range(seconds):
        raise NumericOverflowError(_overflow_message(text))

    instant = Instant.from_millis(value) if millis else Instant(seconds=value)
    logger.debug("Parsed timestamp %s (millis=%s) -> %s", text, millis, instant)
    return instant


def parse_formatted(
    text: str,
    *,
    input_tz: TimeZoneChoice = TimeZoneChoice.UTC,
) -> Instant:
    """Parse ``YYYY/MM/DD HH:MM:SS`` into an Instant."""
    match = FORMATTED_PATTERN.match(text)
    if match is None:
        msg = f"Invalid datetime {text!r}: expected format {EXPECTED_FORMAT}"
        raise ParseError(msg)

    fields = {name: int(value) for name, value in match.groupdict().items()}
    _validate_components(fields)

    naive = datetime(
        fields["year"],
        fields["month"],
        fields["day"],
        fields["hour"],
        fields["minute"],
        fields["second"],
    )
    if input_tz is TimeZoneChoice.LOCAL:
        try:
            instant = Instant.from_datetime(_resolve_local(naive))
        except (OverflowError, OSError) as exc:
            msg = f"Local datetime {text!r} falls outside years 0001-9999 in UTC"
            raise ParseError(msg) from exc
    else:
        instant = Instant.from_datetime(naive.replace(tzinfo=UTC))

    logger.debug("Parsed datetime %r (%s) -> %s", text, input_tz.label, instant)
    return instant


def _validate_components(fields: dict[str, int]) -> None:
    year, month, day = fields["year"], fields["month"], fields["day"]
    if year < 1:
        msg = f"Invalid year {year}: must be between 0001 and 9999"
        raise InvalidDateComponentError("year", year, msg)
    if not 1 <= month <= 12:
        msg = f"Invalid month {month}: must be between 1 and 12"
        raise InvalidDateComponentError("month", month, msg)

    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        msg = f"Invalid day {day}: {year:04d}/{month:02d} has {days_in_month} days"
        raise InvalidDateComponentError("day", day, msg)

    for name, upper in _CLOCK_LIMITS:
        value = fields[name]
        if value > upper:
            msg = f"Invalid {name} {value}: must be between 0 and {upper}"
            raise InvalidDateComponentError(name, value, msg)


def _resolve_local(naive: datetime) -> datetime:
    """Attach the host's local offset, rejecting DST gaps and overlaps."""
    early = naive.replace(fold=0).astimezone()
    late = naive.replace(fold=1).astimezone()
    if early.utcoffset() != late.utcoffset():
        msg = (
            f"Ambiguous or non-existent local time {naive:%Y/%m/%d %H:%M:%S} "
            "(DST transition)"
        )
        raise AmbiguousLocalTimeError(msg)
    return early


def _overflow_message(text: str) -> str:
    return f"Unix timestamp {text} is out of range (years 0001-9999)"
