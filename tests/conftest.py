"""Shared pytest fixtures and test helpers for retry_after tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime

import pytest

from retry_after.config.settings import reset_settings

# The instant every example in RFC 7231 Section 7.1.1.1 denotes.
RFC_EXAMPLE_INSTANT = datetime(1994, 11, 6, 8, 49, 37, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate each test from RETRY_AFTER_* env vars and cached settings."""
    for name in (
        "RETRY_AFTER_VERBOSE",
        "RETRY_AFTER_LOG_JSON",
        "RETRY_AFTER_DATES",
        "RETRY_AFTER_DATES__CENTURY_PIVOT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def rfc_instant() -> datetime:
    return RFC_EXAMPLE_INSTANT
