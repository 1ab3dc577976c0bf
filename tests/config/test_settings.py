"""Tests for RetryAfterSettings, DateConfig, and the settings cache."""

import pytest
from pydantic import ValidationError

from retry_after.config.models import DateConfig
from retry_after.config.settings import RetryAfterSettings, get_settings, reset_settings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = RetryAfterSettings()
        assert settings.dates.century_pivot == 70
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = RetryAfterSettings()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestEnvSource:
    def test_flat_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETRY_AFTER_VERBOSE", "true")
        monkeypatch.setenv("RETRY_AFTER_LOG_JSON", "1")
        settings = RetryAfterSettings()
        assert settings.verbose is True
        assert settings.log_json is True

    def test_nested_pivot(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETRY_AFTER_DATES__CENTURY_PIVOT", "50")
        assert RetryAfterSettings().dates.century_pivot == 50

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETRY_AFTER_VERBOSE", "true")
        assert RetryAfterSettings(verbose=False).verbose is False

    def test_invalid_pivot(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETRY_AFTER_DATES__CENTURY_PIVOT", "101")
        with pytest.raises(ValidationError):
            RetryAfterSettings()


class TestDateConfig:
    def test_default(self) -> None:
        assert DateConfig().century_pivot == 70

    @pytest.mark.parametrize("pivot", [-1, 101])
    def test_out_of_range(self, pivot: int) -> None:
        with pytest.raises(ValidationError):
            DateConfig(century_pivot=pivot)

    def test_bounds_allowed(self) -> None:
        assert DateConfig(century_pivot=0).century_pivot == 0
        assert DateConfig(century_pivot=100).century_pivot == 100


class TestCache:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_rereads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert get_settings().verbose is False
        monkeypatch.setenv("RETRY_AFTER_VERBOSE", "true")
        assert get_settings().verbose is False
        reset_settings()
        assert get_settings().verbose is True
