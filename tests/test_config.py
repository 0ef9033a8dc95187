import pytest
from pydantic import ValidationError

from credential_service.config import Settings
from credential_service.main import create_app


def test_missing_secret_fails_startup(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    with pytest.raises(ValidationError):
        create_app()


def test_empty_secret_rejected(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("PORT", "6000")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")

    settings = Settings(_env_file=None)
    assert settings.JWT_SECRET == "from-env"
    assert settings.PORT == 6000
    assert settings.DATABASE_URL == "sqlite:///./other.db"


def test_defaults(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "s")
    for name in ("PORT", "BCRYPT_ROUNDS", "ACCESS_TOKEN_EXPIRE_MINUTES", "REPORT_DUPLICATE_EMAIL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.PORT == 5001
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.REPORT_DUPLICATE_EMAIL is False


def test_rounds_out_of_range_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, JWT_SECRET="s", BCRYPT_ROUNDS=3)
