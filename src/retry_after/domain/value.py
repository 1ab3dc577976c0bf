"""The Retry-After value: a relative delay or an absolute instant.

RFC 7231 Section 7.1.3 allows either form on the wire. In memory the two are
separate frozen models joined into the discriminated union ``RetryAfter``.

INVARIANT: A Delay is never negative. An At is always an aware UTC datetime.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

# Largest whole-second count a timedelta can hold.
MAX_DELAY_SECONDS = timedelta.max // timedelta(seconds=1)


class Delay(BaseModel):
    """Retry once *duration* has elapsed since the response was received."""

    model_config = {"frozen": True}

    kind: Literal["delay"] = "delay"
    duration: timedelta

    @field_validator("duration")
    @classmethod
    def _check_range(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            msg = f"delay must not be negative, got {value}"
            raise ValueError(msg)
        if value > timedelta(seconds=MAX_DELAY_SECONDS):
            msg = f"delay exceeds {MAX_DELAY_SECONDS} seconds"
            raise ValueError(msg)
        return value

    @classmethod
    def of_seconds(cls, seconds: int) -> Delay:
        return cls(duration=timedelta(seconds=seconds))

    @classmethod
    def from_timedelta(cls, duration: timedelta) -> Delay:
        return cls(duration=duration)

    @property
    def seconds(self) -> int:
        """Whole seconds of the delay; any fraction is truncated."""
        return self.duration // timedelta(seconds=1)

    def to_timedelta(self) -> timedelta:
        return self.duration


class At(BaseModel):
    """Do not retry before *instant*."""

    model_config = {"frozen": True}

    kind: Literal["at"] = "at"
    instant: datetime

    @field_validator("instant")
    @classmethod
    def _normalize_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            msg = "instant must be timezone-aware"
            raise ValueError(msg)
        try:
            return value.astimezone(UTC)
        except OverflowError as exc:
            msg = f"instant {value.isoformat()} is outside the UTC datetime range"
            raise ValueError(msg) from exc

    @classmethod
    def from_datetime(cls, instant: datetime) -> At:
        return cls(instant=instant)

    def to_datetime(self) -> datetime:
        return self.instant


RetryAfter = Annotated[Delay | At, Field(discriminator="kind")]

RETRY_AFTER_ADAPTER: TypeAdapter[Delay | At] = TypeAdapter(RetryAfter)


def retry_in(delay: int | timedelta, *, now: datetime | None = None) -> At:
    """Build an absolute At value *delay* from *now* (default: current UTC time).

    Useful for outgoing responses that want to advertise a date rather than
    a number of seconds.
    """
    if isinstance(delay, int):
        try:
            delay = timedelta(seconds=delay)
        except OverflowError as exc:
            msg = f"delay of {delay} seconds is out of range"
            raise ValueError(msg) from exc
    if delay < timedelta(0):
        msg = f"delay must not be negative, got {delay}"
        raise ValueError(msg)
    start = now if now is not None else datetime.now(UTC)
    try:
        instant = start + delay
    except OverflowError as exc:
        msg = f"{start.isoformat()} + {delay} is out of range"
        raise ValueError(msg) from exc
    return At(instant=instant)


def retry_at(value: Delay | At, *, received_at: datetime) -> datetime:
    """Return the absolute UTC instant designated by *value*.

    A Delay is counted from *received_at*, the time the response carrying the
    header arrived. *received_at* must be timezone-aware.
    """
    if received_at.tzinfo is None:
        msg = "received_at must be timezone-aware"
        raise ValueError(msg)
    if isinstance(value, Delay):
        try:
            return (received_at + value.duration).astimezone(UTC)
        except OverflowError as exc:
            msg = f"{received_at.isoformat()} + {value.duration} is out of range"
            raise ValueError(msg) from exc
    return value.instant


def seconds_until(value: Delay | At, *, now: datetime | None = None) -> float:
    """Seconds left to wait according to *value*, never below zero.

    *now* doubles as the receipt time for Delay values.
    """
    current = now if now is not None else datetime.now(UTC)
    remaining = (retry_at(value, received_at=current) - current).total_seconds()
    return max(0.0, remaining)
