from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    app_name: str = "Joke of the Day API"
    # Default to SQLite for local development; set DATABASE_URL or the DB_* parameters for PostgreSQL
    database_url: str | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_host: str | None = None
    db_port: int = 5432
    db_name: str | None = None

    host: str = "0.0.0.0"
    port: int = 5000

    joke_api_url: str = "https://teehee.dev/api/joke"
    joke_api_timeout: float = 5.0
    available_votes: list[str] = ["😂", "👍", "❤️", "🤔", "😐"]

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        if self.db_host:
            return URL.create(
                "postgresql+psycopg2",
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            )
        return "sqlite:///./jokes.db"


settings = Settings()
