"""Decode failures for Retry-After values.

Encoding is total, so every error here belongs to the decode path.
All of them subclass ValueError so callers that only care about
"unparseable header" can catch that.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable identifiers for decode failures."""

    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    INVALID_BYTE_SEQUENCE = "INVALID_BYTE_SEQUENCE"
    FORMAT_NOT_RECOGNIZED = "FORMAT_NOT_RECOGNIZED"


class RetryAfterError(ValueError):
    """Base class for Retry-After decode failures.

    Attributes:
        code: Machine-readable failure class.
        raw: The header value that failed to decode.
    """

    code: ErrorCode

    def __init__(self, message: str, *, raw: bytes = b"") -> None:
        super().__init__(message)
        self.raw = raw


class InsufficientDataError(RetryAfterError):
    """The header value is empty."""

    code = ErrorCode.INSUFFICIENT_DATA


class InvalidByteSequenceError(RetryAfterError):
    """The header value is not valid UTF-8."""

    code = ErrorCode.INVALID_BYTE_SEQUENCE


class FormatNotRecognizedError(RetryAfterError):
    """Valid text that is neither delay-seconds nor an HTTP-date."""

    code = ErrorCode.FORMAT_NOT_RECOGNIZED
