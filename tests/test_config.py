from sqlalchemy.engine import URL

from app.config import Settings


def test_defaults_to_local_sqlite(monkeypatch):
    for name in ("DATABASE_URL", "DB_HOST", "PORT", "AVAILABLE_VOTES"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.sqlalchemy_url == "sqlite:///./jokes.db"
    assert settings.port == 5000
    assert settings.available_votes == ["😂", "👍", "❤️", "🤔", "😐"]


def test_postgres_url_from_db_parameters(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_USER", "jokes")
    monkeypatch.setenv("DB_PASSWORD", "secret")
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "jokes_db")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    url = settings.sqlalchemy_url
    assert isinstance(url, URL)
    assert url.drivername == "postgresql+psycopg2"
    assert (url.username, url.host, url.port, url.database) == ("jokes", "db.internal", 6543, "jokes_db")
    assert settings.port == 8080


def test_database_url_takes_precedence(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("DB_HOST", "ignored")
    assert Settings(_env_file=None).sqlalchemy_url == "sqlite:///./other.db"
