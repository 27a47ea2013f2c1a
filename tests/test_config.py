"""Tests for settings loading."""

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError as SettingsValidationError

from asset_ledger.config import (
    DEFAULT_CSV_ENCODINGS,
    Environment,
    LogLevel,
    Settings,
    get_settings,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.csv_encodings == DEFAULT_CSV_ENCODINGS
        assert settings.decode_preview_bytes == 16
        assert settings.duplicate_amount_tolerance == Decimal("0.001")
        assert settings.log_level == LogLevel.WARNING
        assert settings.log_format == "console"
        assert settings.sqlite_path.name == "ledger.db"
        assert not settings.is_production

    def test_production_defaults_to_json_logs(self):
        settings = Settings(environment=Environment.PRODUCTION)

        assert settings.is_production
        assert settings.log_format == "json"

    def test_explicit_log_format_wins(self):
        settings = Settings(environment=Environment.PRODUCTION, log_format="console")

        assert settings.log_format == "console"

    def test_reads_environment_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ASSET_LEDGER_SQLITE_PATH", str(tmp_path / "x.db"))
        monkeypatch.setenv("ASSET_LEDGER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ASSET_LEDGER_CSV_ENCODINGS", '["cp1252", "utf-8"]')
        monkeypatch.setenv("ASSET_LEDGER_DUPLICATE_AMOUNT_TOLERANCE", "0.01")

        settings = Settings()

        assert settings.sqlite_path == Path(tmp_path / "x.db")
        assert settings.log_level == LogLevel.DEBUG
        assert settings.csv_encodings == ["cp1252", "utf-8"]
        assert settings.duplicate_amount_tolerance == Decimal("0.01")

    def test_rejects_empty_encoding_list(self):
        with pytest.raises(SettingsValidationError):
            Settings(csv_encodings=[])

    def test_rejects_non_positive_tolerance(self):
        with pytest.raises(SettingsValidationError):
            Settings(duplicate_amount_tolerance=Decimal("0"))


class TestGetSettings:
    def test_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("ASSET_LEDGER_DECODE_PREVIEW_BYTES", "4")
        get_settings.cache_clear()

        second = get_settings()

        assert second is not first
        assert second.decode_preview_bytes == 4
