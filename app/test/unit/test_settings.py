# app/test/unit/test_settings.py

import pytest

from app.adapters.configuration.config import Settings, parse_duration


@pytest.mark.parametrize("value, expected", [(3600, 3600), ("45s", 45), ("30m", 1800), ("1h", 3600), ("7d", 604800), ("120", 120)])
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "1w", "-5m", 0])
def test_parse_duration_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_duration(value)


def test_postgres_url_forced_to_asyncpg_without_sslmode(monkeypatch):
    monkeypatch.setenv("DB_CONNECTION_STRING", "postgres://u:p@db.example.com:5432/app?sslmode=require")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    config = Settings()

    assert config.DATABASE_URL == "postgresql+asyncpg://u:p@db.example.com:5432/app"


def test_jwt_secret_alias(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.setenv("JWT_SECRET", "from-alias")

    assert Settings().signing_secret == "from-alias"


def test_missing_secret_is_none(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)

    assert Settings().signing_secret is None


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.com, http://b.com")
    assert Settings().CORS_ORIGINS == ["http://a.com", "http://b.com"]


def test_jwt_expires_in_duration(monkeypatch):
    monkeypatch.setenv("JWT_EXPIRES_IN", "2h")
    assert Settings().JWT_EXPIRES_IN == 7200
