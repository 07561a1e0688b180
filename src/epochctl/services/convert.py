"""Conversion pipeline: Classify -> Parse -> Render.

:func:`convert` is the pure core the CLI calls with already-parsed flags
and the raw input string.  It raises :class:`ConversionError` on the first
failure.  :class:`ConvertService` wraps it in a :class:`ServiceResult`.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from epochctl.domain.classify import classify_input
from epochctl.domain.errors import ConversionError, InvalidDateComponentError
from epochctl.domain.instant import Instant
from epochctl.domain.parse import parse_input
from epochctl.domain.types import InputKind, OutputFormat, TimeUnit, TimeZoneChoice
from epochctl.output.render import render
from epochctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ConversionOptions:
    """Flags that shape a single conversion."""

    output_format: OutputFormat = OutputFormat.RFC3339
    unit: TimeUnit | None = None
    input_tz: TimeZoneChoice = TimeZoneChoice.UTC
    output_tz: TimeZoneChoice = TimeZoneChoice.UTC
    pattern: str | None = None


@dataclass(frozen=True)
class Conversion:
    """Outcome of a successful conversion."""

    raw: str
    kind: InputKind
    instant: Instant
    output: str


def convert(raw: str, options: ConversionOptions | None = None) -> Conversion:
    """Run the full pipeline on *raw*.

    Raises:
        ClassificationError: Input shape not recognized.
        ParseError: Input shape recognized but the literal is invalid.
    """
    options = options or ConversionOptions()
    kind = classify_input(raw, unit=options.unit)
    instant = parse_input(raw, kind, input_tz=options.input_tz)
    output = render(
        instant,
        options.output_format,
        output_tz=options.output_tz,
        pattern=options.pattern,
        raw=raw,
        kind=kind,
        input_tz=options.input_tz,
    )
    return Conversion(raw=raw, kind=kind, instant=instant, output=output)


class ConvertService:
    """Service facade returning ServiceResult for the CLI."""

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self._options = options or ConversionOptions()

    def convert(self, raw: str) -> ServiceResult:
        try:
            conversion = convert(raw, self._options)
        except ConversionError as exc:
            log.debug("conversion.failed", input=raw, code=exc.code)
            detail = {"input": raw}
            if isinstance(exc, InvalidDateComponentError):
                detail["component"] = exc.component
            return ServiceResult(
                ok=False,
                op="convert",
                error=ServiceError(code=exc.code, message=exc.message, detail=detail),
            )

        log.debug(
            "conversion.complete",
            input=raw,
            parsed_as=str(conversion.kind),
            unix=conversion.instant.seconds,
        )
        return ServiceResult(
            ok=True,
            op="convert",
            data={
                "output": conversion.output,
                "parsed_as": str(conversion.kind),
                "unix": conversion.instant.seconds,
                "input_tz": self._options.input_tz.label,
                "output_tz": self._options.output_tz.label,
            },
        )
