"""
Unit tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from mongo_schema.config.settings import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.max_try_records == 100
        assert settings.output_format == "json"
        assert settings.preserve_first_entry is False
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MONGO_SCHEMA_MAX_TRY_RECORDS", "25")
        monkeypatch.setenv("MONGO_SCHEMA_LOG_JSON", "true")

        settings = Settings()

        assert settings.max_try_records == 25
        assert settings.log_json is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_sample_size_must_be_positive(self, monkeypatch, value):
        monkeypatch.setenv("MONGO_SCHEMA_MAX_TRY_RECORDS", value)

        with pytest.raises(ValidationError):
            Settings()
