"""DecodeResult and DecodeError — the non-raising decode contract.

For call sites that prefer a value over an exception (batch processing,
JSON APIs), :func:`try_decode` folds every decode failure into a frozen
result object.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from retry_after.codec import decode
from retry_after.domain.value import RetryAfter
from retry_after.errors import ErrorCode, RetryAfterError


class DecodeError(BaseModel):
    """Structured error payload within a DecodeResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class DecodeResult(BaseModel):
    """Outcome of decoding one Retry-After value.

    Attributes:
        ok: Whether decoding succeeded.
        value: The decoded value on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    value: RetryAfter | None = None
    error: DecodeError | None = None


def try_decode(
    raw: bytes | bytearray | memoryview, *, century_pivot: int | None = None
) -> DecodeResult:
    """Decode *raw* like :func:`retry_after.codec.decode`, without raising."""
    try:
        value = decode(raw, century_pivot=century_pivot)
    except RetryAfterError as exc:
        error = DecodeError(
            code=exc.code,
            message=str(exc),
            detail={"raw": exc.raw.decode("utf-8", errors="replace")},
        )
        return DecodeResult(ok=False, error=error)
    return DecodeResult(ok=True, value=value)
