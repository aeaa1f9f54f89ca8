import pytest
from pydantic import ValidationError

from teacherson.core.config import Settings


def test_cors_origins_from_comma_separated_string():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_list_passthrough():
    settings = Settings(CORS_ORIGINS=["http://a.test"])
    assert settings.CORS_ORIGINS == ["http://a.test"]


def test_log_level_normalized():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("TEACHERSON_MONGO_DB_NAME", "teacherson_test")
    assert Settings().MONGO_DB_NAME == "teacherson_test"
