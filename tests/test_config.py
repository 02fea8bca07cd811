"""
Tests for settings loading
"""

import pytest
from pydantic import ValidationError

from portfolio_api.config import OWNER_EMAIL_PLACEHOLDER, Settings, get_owner_email, settings

REQUIRED_ENV = (
    "PORTFOLIO_MONGO_DB_URI",
    "MONGO_DB_URI",
    "PORTFOLIO_API_HOST",
    "AXUM_ADDRESS",
    "PORTFOLIO_API_PORT",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in REQUIRED_ENV + ("PORTFOLIO_USER_EMAIL", "USER_EMAIL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_required_values_fail(clean_env):
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert [error["type"] for error in exc_info.value.errors()] == ["missing"] * 3


def test_container_variable_names_are_accepted(clean_env):
    clean_env.setenv("MONGO_DB_URI", "mongodb://mongo:27017")
    clean_env.setenv("AXUM_ADDRESS", "0.0.0.0")
    clean_env.setenv("PORT", "3000")
    clean_env.setenv("USER_EMAIL", "owner@example.com")

    loaded = Settings(_env_file=None)

    assert loaded.mongo_db_uri == "mongodb://mongo:27017"
    assert loaded.api_host == "0.0.0.0"
    assert loaded.api_port == 3000
    assert loaded.user_email == "owner@example.com"
    assert loaded.database_name == "personal"


def test_prefixed_names_take_precedence(clean_env):
    clean_env.setenv("PORTFOLIO_MONGO_DB_URI", "mongodb://primary:27017")
    clean_env.setenv("MONGO_DB_URI", "mongodb://fallback:27017")
    clean_env.setenv("PORTFOLIO_API_HOST", "127.0.0.1")
    clean_env.setenv("PORTFOLIO_API_PORT", "8080")

    loaded = Settings(_env_file=None)

    assert loaded.mongo_db_uri == "mongodb://primary:27017"
    assert loaded.user_email is None


def test_port_must_be_an_integer(clean_env):
    clean_env.setenv("MONGO_DB_URI", "mongodb://mongo:27017")
    clean_env.setenv("AXUM_ADDRESS", "0.0.0.0")
    clean_env.setenv("PORT", "not-a-port")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_owner_email_uses_configured_value(monkeypatch):
    monkeypatch.setattr(settings, "user_email", "owner@example.com")

    assert get_owner_email() == "owner@example.com"


@pytest.mark.parametrize("value", [None, ""])
def test_owner_email_falls_back_to_placeholder(monkeypatch, value):
    monkeypatch.setattr(settings, "user_email", value)

    assert get_owner_email() == OWNER_EMAIL_PLACEHOLDER
