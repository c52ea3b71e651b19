from __future__ import annotations

import pytest

from config.settings import DEFAULT_CLEAR_RANGE, DEFAULT_WRITE_RANGE, ConfigError, Settings

REQUIRED_ENV = {
    "SHEET_ID": "sheet-123",
    "SOURCE_API_URL": "https://api.example.com/shops",
    "SOURCE_API_KEY": "secret-key",
}


def test_from_env_applies_range_defaults():
    s = Settings.from_env(REQUIRED_ENV)
    assert s.SHEET_ID == "sheet-123"
    assert s.WRITE_RANGE == DEFAULT_WRITE_RANGE == "シート!A2"
    assert s.CLEAR_RANGE == DEFAULT_CLEAR_RANGE == "シート!A12:Z2000"
    assert s.GOOGLE_CREDENTIALS_PATH is None
    assert s.LOG_LEVEL == "INFO"


def test_from_env_overrides_and_empty_optional_falls_back():
    env = dict(REQUIRED_ENV, WRITE_RANGE="Data!B3", CLEAR_RANGE="", LOG_FILE="logs/sync.log")
    s = Settings.from_env(env)
    assert s.WRITE_RANGE == "Data!B3"
    assert s.CLEAR_RANGE == DEFAULT_CLEAR_RANGE
    assert s.LOG_FILE == "logs/sync.log"


@pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
def test_missing_required_setting(missing):
    env = {k: v for k, v in REQUIRED_ENV.items() if k != missing}
    with pytest.raises(ConfigError) as e:
        Settings.from_env(env)
    assert missing in str(e.value)


@pytest.mark.parametrize("empty", sorted(REQUIRED_ENV))
def test_empty_required_setting(empty):
    env = dict(REQUIRED_ENV, **{empty: ""})
    with pytest.raises(ConfigError):
        Settings.from_env(env)


def test_error_lists_every_missing_setting():
    with pytest.raises(ConfigError) as e:
        Settings.from_env({})
    assert "SHEET_ID, SOURCE_API_URL, SOURCE_API_KEY" in str(e.value)


def test_from_env_reads_process_environment(monkeypatch):
    for k, v in REQUIRED_ENV.items():
        monkeypatch.setenv(k, v)
    assert Settings.from_env().SOURCE_API_URL == "https://api.example.com/shops"


def test_settings_are_immutable():
    s = Settings.from_env(REQUIRED_ENV)
    with pytest.raises(AttributeError):
        s.SHEET_ID = "other"


def test_repr_hides_api_key():
    assert "secret-key" not in repr(Settings.from_env(REQUIRED_ENV))
