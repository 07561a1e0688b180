"""Renderer: turn an Instant into the requested output string.

RFC3339 text is ``YYYY-MM-DDTHH:MM:SSZ`` in UTC (a numeric ``+HH:MM``
offset when rendering in local time).  A fractional part appears only for
a non-zero nanosecond remainder, trimmed to the digits it needs.

Unix output is always whole seconds (floor), whatever the input unit.

JSON output is a single-line object.  Its key names are a stable contract;
see :class:`ConversionPayload`.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel

from epochctl.domain.errors import NumericOverflowError
from epochctl.domain.instant import Instant
from epochctl.domain.types import InputKind, OutputFormat, TimeZoneChoice

SCHEMA_VERSION = 1


class ConversionPayload(BaseModel):
    """JSON output document."""

    model_config = {"frozen": True}

    schema_version: int = SCHEMA_VERSION
    input: str | None = None
    parsed_as: InputKind | None = None
    unix: int
    unix_millis: int
    rfc3339: str
    input_tz: str = TimeZoneChoice.UTC.label
    output_tz: str = TimeZoneChoice.UTC.label


def render(
    instant: Instant,
    fmt: OutputFormat,
    *,
    output_tz: TimeZoneChoice = TimeZoneChoice.UTC,
    pattern: str | None = None,
    raw: str | None = None,
    kind: InputKind | None = None,
    input_tz: TimeZoneChoice = TimeZoneChoice.UTC,
) -> str:
    """Render *instant* in the output format *fmt*.

    Args:
        instant: The instant to render.
        fmt: Output representation.
        output_tz: Zone for RFC3339 text (also inside the JSON payload).
        pattern: strftime pattern replacing RFC3339 text; applies to
            ``OutputFormat.RFC3339`` only.
        raw: Original input, echoed in the JSON payload.
        kind: How the input was classified, echoed in the JSON payload.
        input_tz: Zone the input was read in, echoed in the JSON payload.

    Raises:
        NumericOverflowError: Local-zone output whose wall time falls
            outside years 0001-9999.
    """
    if fmt is OutputFormat.UNIX:
        return render_unix(instant)
    if fmt is OutputFormat.JSON:
        payload = build_payload(
            instant,
            raw=raw,
            kind=kind,
            input_tz=input_tz,
            output_tz=output_tz,
        )
        return render_json(payload)
    if pattern:
        return render_strftime(instant, pattern, output_tz=output_tz)
    return render_rfc3339(instant, output_tz=output_tz)


def render_unix(instant: Instant) -> str:
    return str(instant.seconds)


def render_rfc3339(
    instant: Instant,
    *,
    output_tz: TimeZoneChoice = TimeZoneChoice.UTC,
) -> str:
    dt = _to_datetime(instant, output_tz)
    date_part = f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
    time_part = f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    return f"{date_part}T{time_part}{_fraction(instant.nanos)}{_offset(dt, output_tz)}"


def render_strftime(
    instant: Instant,
    pattern: str,
    *,
    output_tz: TimeZoneChoice = TimeZoneChoice.UTC,
) -> str:
    dt = _to_datetime(instant, output_tz)
    return dt.replace(microsecond=instant.nanos // 1000).strftime(pattern)


def build_payload(
    instant: Instant,
    *,
    raw: str | None = None,
    kind: InputKind | None = None,
    input_tz: TimeZoneChoice = TimeZoneChoice.UTC,
    output_tz: TimeZoneChoice = TimeZoneChoice.UTC,
) -> ConversionPayload:
    return ConversionPayload(
        input=raw,
        parsed_as=kind,
        unix=instant.seconds,
        unix_millis=instant.millis,
        rfc3339=render_rfc3339(instant, output_tz=output_tz),
        input_tz=input_tz.label,
        output_tz=output_tz.label,
    )


def render_json(payload: ConversionPayload) -> str:
    return payload.model_dump_json()


def _to_datetime(instant: Instant, output_tz: TimeZoneChoice) -> datetime:
    if output_tz is TimeZoneChoice.UTC:
        return instant.to_datetime()
    try:
        return instant.to_datetime(None)
    except (OverflowError, OSError) as exc:
        msg = (
            f"Unix timestamp {instant.seconds} has no local representation "
            "within years 0001-9999"
        )
        raise NumericOverflowError(msg) from exc


def _fraction(nanos: int) -> str:
    if not nanos:
        return ""
    return "." + f"{nanos:09d}".rstrip("0")


def _offset(dt: datetime, output_tz: TimeZoneChoice) -> str:
    if output_tz is TimeZoneChoice.UTC:
        return "Z"
    offset_seconds = int((dt.utcoffset() or timedelta(0)).total_seconds())
    sign = "-" if offset_seconds < 0 else "+"
    # Sub-minute offsets (LMT) are truncated toward zero.
    hours, minutes = divmod(abs(offset_seconds) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
