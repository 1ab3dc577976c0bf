"""Wire codec for the Retry-After header value.

Decoding tries, in order: delay-seconds (``1*DIGIT``), then the three
HTTP-date grammars. Encoding always emits delay-seconds or an RFC 1123 date,
so the two directions are intentionally asymmetric (RFC 7231 Section 7.1.1.1:
recipients accept all three date formats, senders use only IMF-fixdate).
"""

from __future__ import annotations

import logging
import re

from retry_after.config.settings import get_settings
from retry_after.domain.dates import HttpDateError, format_http_date, parse_http_date
from retry_after.domain.value import MAX_DELAY_SECONDS, At, Delay
from retry_after.errors import (
    FormatNotRecognizedError,
    InsufficientDataError,
    InvalidByteSequenceError,
    RetryAfterError,
)

logger = logging.getLogger(__name__)

# ASCII digits only: str.isdigit() would also admit other scripts' digits.
DELAY_SECONDS_PATTERN = re.compile(r"[0-9]+")

_MAX_DELAY_DIGITS = len(str(MAX_DELAY_SECONDS))


def _parse_delay_seconds(text: str) -> Delay | None:
    """Return a Delay if *text* is exactly ``1*DIGIT`` and fits, else None."""
    if DELAY_SECONDS_PATTERN.fullmatch(text) is None:
        return None
    digits = text.lstrip("0") or "0"
    if len(digits) > _MAX_DELAY_DIGITS:
        return None
    seconds = int(digits)
    if seconds > MAX_DELAY_SECONDS:
        return None
    return Delay.of_seconds(seconds)


def _fail(error: RetryAfterError) -> RetryAfterError:
    logger.debug("Retry-After decode failed (%s): %r", error.code, error.raw)
    return error


def decode(
    raw: bytes | bytearray | memoryview, *, century_pivot: int | None = None
) -> Delay | At:
    """Decode a raw Retry-After header value.

    Args:
        raw: The header value bytes, without the field name.
        century_pivot: Override for the RFC 850 two-digit year pivot.
            Defaults to ``RetryAfterSettings.dates.century_pivot``.

    Raises:
        InsufficientDataError: *raw* is empty.
        InvalidByteSequenceError: *raw* is not valid UTF-8.
        FormatNotRecognizedError: Neither delay-seconds nor an HTTP-date.
    """
    data = bytes(raw)
    if not data:
        raise _fail(InsufficientDataError("empty Retry-After value", raw=data))

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _fail(
            InvalidByteSequenceError(f"Retry-After value is not valid UTF-8: {exc}", raw=data)
        ) from exc

    delay = _parse_delay_seconds(text)
    if delay is not None:
        return delay

    if century_pivot is None:
        century_pivot = get_settings().dates.century_pivot
    try:
        instant = parse_http_date(text, century_pivot=century_pivot)
    except HttpDateError as exc:
        raise _fail(
            FormatNotRecognizedError(f"unrecognized Retry-After value {text!r}", raw=data)
        ) from exc
    return At(instant=instant)


def encode(value: Delay | At) -> bytes:
    """Encode *value* as Retry-After header bytes.

    A Delay becomes its whole-second count (fractions truncated). An At
    becomes an RFC 1123 date in GMT (sub-seconds dropped).
    """
    if isinstance(value, Delay):
        text = str(value.seconds)
    elif isinstance(value, At):
        text = format_http_date(value.instant)
    else:
        msg = f"expected Delay or At, got {type(value).__name__}"
        raise TypeError(msg)
    return text.encode("ascii")
