"""InputClassifier: decide the shape of a raw input string.

Numeric input (optional sign, ASCII decimal digits) is a unix timestamp.  The
seconds/millis split is a fixed magnitude cutoff: ``abs(value) >= 10**12``
is milliseconds, anything smaller is seconds.  ``10**12`` seconds is far
beyond year 9999 while ``10**12`` milliseconds is 2001-09-09, so every
current 10-digit value reads as seconds and every 13-digit value as millis.

Non-numeric input is a formatted datetime if it only uses the characters
of ``YYYY/MM/DD HH:MM:SS``; the parser validates the exact structure.
"""

from __future__ import annotations

import logging
import re

from epochctl.domain.errors import ClassificationError
from epochctl.domain.types import InputKind, TimeUnit

logger = logging.getLogger(__name__)

MILLIS_THRESHOLD = 10**12

NUMERIC_PATTERN = re.compile(r"^[+-]?[0-9]+$")
DATETIME_CHARSET = re.compile(r"^[0-9/: ]+$")


def classify_input(raw: str, *, unit: TimeUnit | None = None) -> InputKind:
    """Return the InputKind of *raw*.

    Args:
        raw: Input string; surrounding whitespace is ignored.
        unit: Force the unit for numeric input instead of auto-detection.

    Raises:
        ClassificationError: Empty input, or characters that fit neither
            the numeric nor the datetime shape.
    """
    text = raw.strip()
    if not text:
        msg = "Empty input: expected a unix timestamp or YYYY/MM/DD HH:MM:SS"
        raise ClassificationError(msg)

    if NUMERIC_PATTERN.match(text):
        if unit is not None:
            kind = InputKind.UNIX_MILLIS if unit is TimeUnit.MILLIS else InputKind.UNIX_SECONDS
        else:
            kind = _kind_for_magnitude(text)
        logger.debug("Classified %r as %s", text, kind)
        return kind

    if DATETIME_CHARSET.match(text) and "/" in text:
        logger.debug("Classified %r as %s", text, InputKind.FORMATTED)
        return InputKind.FORMATTED

    msg = f"Unrecognized input {raw!r}: expected a unix timestamp or YYYY/MM/DD HH:MM:SS"
    raise ClassificationError(msg)


def _kind_for_magnitude(text: str) -> InputKind:
    digits = text.lstrip("+-").lstrip("0") or "0"
    # Compare by length first so huge literals never become ints here.
    if len(digits) > len(str(MILLIS_THRESHOLD)) or int(digits) >= MILLIS_THRESHOLD:
        return InputKind.UNIX_MILLIS
    return InputKind.UNIX_SECONDS
