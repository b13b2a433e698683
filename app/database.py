import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str | URL, **kwargs) -> Engine:
    connect_args = kwargs.pop("connect_args", {})
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, future=True, connect_args=connect_args, **kwargs)


class JokeStore:
    """Database handle owned by the application.

    Opened once at startup (creating the jokes table if needed) and closed at
    shutdown. Request handlers get sessions from it through ``get_db``.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    def open(self) -> None:
        logger.info("Opening joke store at %s", self.engine.url.render_as_string(hide_password=True))
        Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        logger.info("Closing joke store")
        self.engine.dispose()

    def session(self) -> Session:
        return self.session_factory()


def get_db(request: Request):
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()
