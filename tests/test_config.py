"""Tests for settings and database URL handling."""
from pos_api.config import Settings
from pos_api.database import build_database_url, engine_options


def test_settings_accept_db_conn(monkeypatch):
    """Test DB_CONN is accepted as the database URL."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_CONN", "postgresql://user:secret@db:5432/shop")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "postgresql://user:secret@db:5432/shop"


def test_settings_defaults(monkeypatch):
    """Test defaults when nothing is configured."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.LOG_LEVEL == "INFO"
    assert settings.DB_SSLMODE is None


def test_build_database_url_appends_sslmode():
    """Test sslmode is appended with the right separator."""
    assert (
        build_database_url("postgresql://u:p@host/db", "require")
        == "postgresql://u:p@host/db?sslmode=require"
    )
    assert (
        build_database_url("postgresql://u:p@host/db?connect_timeout=5", "require")
        == "postgresql://u:p@host/db?connect_timeout=5&sslmode=require"
    )


def test_build_database_url_keeps_existing_sslmode():
    """Test an explicit sslmode in the URL wins."""
    url = "postgresql://u:p@host/db?sslmode=disable"

    assert build_database_url(url, "require") == url


def test_build_database_url_ignores_other_backends():
    """Test non-PostgreSQL URLs and unset sslmode are untouched."""
    assert build_database_url("sqlite://", "require") == "sqlite://"
    assert build_database_url("postgresql://u:p@host/db", None) == "postgresql://u:p@host/db"


def test_engine_options():
    """Test pool sizing only applies to pooled backends."""
    assert "pool_size" not in engine_options("sqlite://")
    options = engine_options("postgresql://u:p@host/db")
    assert options["pool_pre_ping"] is True
    assert options["pool_size"] > 0
