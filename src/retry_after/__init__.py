"""retry_after — typed codec for the HTTP Retry-After header (RFC 7231 7.1.3)."""

from __future__ import annotations

from retry_after.codec import decode, encode
from retry_after.domain.value import (
    RETRY_AFTER_ADAPTER,
    At,
    Delay,
    RetryAfter,
    retry_at,
    retry_in,
    seconds_until,
)
from retry_after.errors import (
    ErrorCode,
    FormatNotRecognizedError,
    InsufficientDataError,
    InvalidByteSequenceError,
    RetryAfterError,
)
from retry_after.header import (
    HEADER_NAME,
    format_header,
    get_retry_after,
    parse_header,
    set_retry_after,
)
from retry_after.result import DecodeError, DecodeResult, try_decode

__version__ = "0.1.0"

__all__ = [
    "HEADER_NAME",
    "RETRY_AFTER_ADAPTER",
    "At",
    "DecodeError",
    "DecodeResult",
    "Delay",
    "ErrorCode",
    "FormatNotRecognizedError",
    "InsufficientDataError",
    "InvalidByteSequenceError",
    "RetryAfter",
    "RetryAfterError",
    "decode",
    "encode",
    "format_header",
    "get_retry_after",
    "parse_header",
    "retry_at",
    "retry_in",
    "seconds_until",
    "set_retry_after",
    "try_decode",
]
