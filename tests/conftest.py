import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database import JokeStore, create_db_engine
from app.exceptions import JokeSourceError
from app.main import create_app
from app.schemas import ExternalJoke


SQLALCHEMY_TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


class FakeJokeSource:
    """Stands in for the public joke API and counts how often it is called."""

    url = "https://jokes.test/api/joke"

    def __init__(self):
        self.joke: ExternalJoke | None = None
        self.calls = 0

    def fetch_random(self) -> ExternalJoke:
        self.calls += 1
        if self.joke is None:
            raise JokeSourceError("Failed to fetch external joke")
        return self.joke


@pytest.fixture
def settings():
    return Settings(_env_file=None, database_url=SQLALCHEMY_TEST_DATABASE_URL)


@pytest.fixture
def joke_source():
    return FakeJokeSource()


@pytest.fixture
def test_engine():
    engine = create_db_engine(SQLALCHEMY_TEST_DATABASE_URL, poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture
def store(test_engine):
    store = JokeStore(test_engine)
    store.open()
    return store


@pytest.fixture
def db_session(store):
    session = store.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings, test_engine, store, joke_source):
    return create_app(settings=settings, engine=test_engine, joke_source=joke_source)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
