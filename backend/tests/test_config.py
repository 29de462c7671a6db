"""Campus Web — Settings Tests."""

import pytest
from pydantic import ValidationError

from campusweb.config import DEV_SESSION_SECRET, Settings


@pytest.mark.parametrize(
    "raw, expected",
    [(" Development ", "development"), ("staging", "staging"), ("", "production")],
)
def test_node_env_is_normalised(monkeypatch, raw, expected):
    monkeypatch.setenv("NODE_ENV", raw)
    assert Settings().node_env == expected


def test_log_level_is_upper_cased():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_production_rejects_dev_session_secret(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    settings = Settings(session_secret=DEV_SESSION_SECRET)

    assert settings.is_production
    with pytest.raises(ValueError, match="SESSION_SECRET"):
        settings.validate_required_for_production()


def test_development_accepts_dev_session_secret():
    # conftest.py sets NODE_ENV=development
    settings = Settings(session_secret=DEV_SESSION_SECRET)
    assert not settings.is_production
    settings.validate_required_for_production()
