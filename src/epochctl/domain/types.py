"""Tagged variants used by the conversion pipeline.

InputKind is produced by the classifier and consumed once by the parser.
OutputFormat is chosen by the CLI and selects the renderer.
"""

from __future__ import annotations

from enum import StrEnum


class InputKind(StrEnum):
    """Shape of a raw input value."""

    UNIX_SECONDS = "unix_seconds"
    UNIX_MILLIS = "unix_millis"
    FORMATTED = "formatted"


class OutputFormat(StrEnum):
    """Canonical output representations."""

    RFC3339 = "rfc3339"
    UNIX = "unix"
    JSON = "json"


class TimeUnit(StrEnum):
    """Forced interpretation for numeric input."""

    SECONDS = "seconds"
    MILLIS = "millis"


class TimeZoneChoice(StrEnum):
    """Zone used to interpret formatted input or render RFC3339 output."""

    UTC = "utc"
    LOCAL = "local"

    @property
    def label(self) -> str:
        return "UTC" if self is TimeZoneChoice.UTC else "local"
