"""Error taxonomy for the conversion pipeline.

Every failure is terminal for the invocation. ``code`` is a stable
machine-readable identifier surfaced through ``ServiceError.code``.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for all classification and parse failures."""

    code = "CONVERSION"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClassificationError(ConversionError):
    """Input is neither a numeric timestamp nor a formatted datetime."""

    code = "CLASSIFICATION"


class ParseError(ConversionError):
    """Malformed literal for the recognized input shape."""

    code = "PARSE"


class NumericOverflowError(ParseError):
    """Numeric timestamp falls outside the representable instant range."""

    code = "NUMERIC_OVERFLOW"


class InvalidDateComponentError(ParseError):
    """A calendar or clock field is out of range."""

    code = "INVALID_DATE_COMPONENT"

    def __init__(self, component: str, value: int, message: str) -> None:
        super().__init__(message)
        self.component = component
        self.value = value


class AmbiguousLocalTimeError(ParseError):
    """Local wall time is skipped or repeated by a DST transition."""

    code = "AMBIGUOUS_LOCAL_TIME"
