"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field

from retry_after.domain.dates import DEFAULT_CENTURY_PIVOT


class DateConfig(BaseModel):
    """HTTP-date parsing options."""

    model_config = {"frozen": True}

    # Two-digit RFC 850 years below the pivot are 20xx, the rest 19xx.
    century_pivot: int = Field(default=DEFAULT_CENTURY_PIVOT, ge=0, le=100)
