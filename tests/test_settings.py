import pytest

from core import db, settings


def test_env_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")

    assert settings.db_pool_max_size() == 5


def test_page_size_floor(monkeypatch):
    monkeypatch.setenv("ADVOCATES_PAGE_SIZE", "0")

    assert settings.advocates_page_size() == 1


def test_cors_origins_parsed(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " https://a.example , ,https://b.example")

    assert settings.cors_allow_origins() == ["https://a.example", "https://b.example"]


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    assert settings.cors_allow_origins() == list(settings.DEFAULT_CORS_ORIGINS)


def test_api_base_url_trailing_slash(monkeypatch):
    monkeypatch.setenv("ADVOCATES_API_BASE_URL", "http://api.local:8000/ ")

    assert settings.advocates_api_base_url() == "http://api.local:8000"


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        db.database_url()


def test_database_url_drops_sslmode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@h:5432/advocates?sslmode=require&application_name=dir")

    assert db.database_url() == "postgresql://u:p@h:5432/advocates?application_name=dir"


def test_pool_requires_init():
    with pytest.raises(RuntimeError, match="not initialized"):
        db.pool()
