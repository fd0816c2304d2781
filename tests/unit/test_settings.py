"""Tests for etl_dialects/settings.py."""

import re

import pytest
from pydantic import ValidationError

from etl_dialects.settings import DialectSettings, get_settings, reset_settings


def test_defaults():
    settings = DialectSettings()
    assert settings.pattern_ignore_case is True
    assert settings.skip_blank_text is True
    assert settings.include_encoding == "utf-8"
    assert settings.include_base_dir is None
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.pattern_flags == re.IGNORECASE


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("ETL_DIALECTS_PATTERN_IGNORE_CASE", "false")
    monkeypatch.setenv("ETL_DIALECTS_LOG_LEVEL", "debug")
    reset_settings()
    settings = get_settings()
    assert settings.pattern_ignore_case is False
    assert settings.pattern_flags == 0
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        DialectSettings(log_level="verbose")


def test_invalid_log_format():
    with pytest.raises(ValidationError):
        DialectSettings(log_format="xml")


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "ETL_DIALECTS_LOG_LEVEL=debug\nETL_DIALECTS_SKIP_BLANK_TEXT=false\n",
        encoding="utf-8",
    )
    settings = DialectSettings(_env_file=env_file)
    assert settings.log_level == "DEBUG"
    assert settings.skip_blank_text is False
