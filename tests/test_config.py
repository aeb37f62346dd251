from datetime import timedelta

import pytest
from pydantic import ValidationError

from route_schema.config import LOG_LEVEL, OSRM_URL, USER_AGENT, VERSION, Settings


def test_version_format():
    assert VERSION == 'dev' or VERSION.startswith('git#'), 'VERSION must be in the "dev" or "git#<commit>" format'


def test_user_agent_contains_version():
    assert VERSION in USER_AGENT


def test_osrm_url_has_no_trailing_slash():
    assert not OSRM_URL.endswith('/')


def test_log_level_resolved():
    assert LOG_LEVEL in {'DEBUG', 'INFO', 'WARNING'}


def test_settings_environment_override(monkeypatch):
    monkeypatch.setenv('OSRM_URL', 'http://localhost:5000/')
    monkeypatch.setenv('OSRM_PROFILE', 'foot')
    monkeypatch.setenv('HTTP_TIMEOUT', '5')
    settings = Settings()
    assert settings.OSRM_URL == 'http://localhost:5000'
    assert settings.OSRM_PROFILE == 'foot'
    assert settings.HTTP_TIMEOUT == timedelta(seconds=5)


def test_settings_invalid_profile(monkeypatch):
    monkeypatch.setenv('OSRM_PROFILE', 'boat')
    with pytest.raises(ValidationError):
        Settings()
