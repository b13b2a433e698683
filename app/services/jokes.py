import logging
from typing import Dict, Sequence

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import schemas
from app.exceptions import (
    InvalidJokeError,
    JokeNotFoundError,
    JokeServiceError,
    NoJokesAvailableError,
    StoreUnavailableError,
)
from app.models import Joke
from app.services.joke_source import ExternalJokeSource

logger = logging.getLogger(__name__)


class JokeService:
    """Joke operations against one database session.

    Votes are a read-modify-write of the whole ``votes`` mapping. The row is
    read ``FOR UPDATE`` so PostgreSQL serializes concurrent votes on the same
    joke; SQLite has no row locks and simultaneous votes can still lose an
    increment there.
    """

    def __init__(self, db: Session, source: ExternalJokeSource, available_votes: Sequence[str]):
        self.db = db
        self.source = source
        self.available_votes = list(available_votes)

    def _present(self, joke: Joke) -> schemas.JokeOfTheDay:
        return schemas.JokeOfTheDay(
            id=joke.id,
            question=joke.question,
            answer=joke.answer,
            votes=dict(joke.votes or {}),
            available_votes=self.available_votes,
        )

    def _store_error(self, message: str, exc: SQLAlchemyError) -> StoreUnavailableError:
        self.db.rollback()
        logger.error("%s: %s", message, exc)
        return StoreUnavailableError(message, exc)

    def get_random_joke(self) -> schemas.JokeOfTheDay:
        try:
            joke = self.db.query(Joke).order_by(func.random()).first()
        except SQLAlchemyError as exc:
            raise self._store_error("Failed to fetch joke", exc) from exc
        if joke is not None:
            return self._present(joke)

        try:
            return self.backfill_from_external_source()
        except JokeServiceError as exc:
            logger.warning("Joke store is empty and backfill failed: %s", exc.message)
            raise NoJokesAvailableError(exc) from exc

    def backfill_from_external_source(self) -> schemas.JokeOfTheDay:
        external = self.source.fetch_random()
        try:
            if self.db.get(Joke, external.id) is None:
                self.db.add(Joke(id=external.id, question=external.question, answer=external.answer, votes={}))
                self.db.commit()
                logger.info("Backfilled joke %s from %s", external.id, self.source.url)
        except SQLAlchemyError as exc:
            raise self._store_error("Failed to store external joke", exc) from exc

        return schemas.JokeOfTheDay(
            id=external.id,
            question=external.question,
            answer=external.answer,
            votes={},
            available_votes=self.available_votes,
        )

    def get_joke(self, joke_id: int) -> schemas.JokeOfTheDay:
        try:
            joke = self.db.get(Joke, joke_id)
        except SQLAlchemyError as exc:
            raise self._store_error("Failed to fetch joke", exc) from exc
        if joke is None:
            raise JokeNotFoundError(joke_id)
        return self._present(joke)

    def vote_joke(self, joke_id: int, emoji: str) -> Dict[str, int]:
        try:
            joke = self.db.get(Joke, joke_id, with_for_update=True)
            if joke is None:
                self.db.rollback()
                raise JokeNotFoundError(joke_id)
            votes = dict(joke.votes or {})
            votes[emoji] = votes.get(emoji, 0) + 1
            # Assign a new dict; in-place mutation of a JSON column is not tracked
            joke.votes = votes
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("Failed to record vote", exc) from exc
        return votes

    def create_joke(self, question: str | None, answer: str | None) -> schemas.JokeRead:
        if not question or not question.strip() or not answer or not answer.strip():
            raise InvalidJokeError("Missing question or answer")
        joke = Joke(question=question, answer=answer, votes={})
        try:
            self.db.add(joke)
            self.db.commit()
            self.db.refresh(joke)
        except SQLAlchemyError as exc:
            raise self._store_error("Database error", exc) from exc
        return schemas.JokeRead.model_validate(joke)

    def delete_joke(self, joke_id: int) -> str:
        try:
            deleted = self.db.query(Joke).filter(Joke.id == joke_id).delete()
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("Failed to delete joke", exc) from exc
        if not deleted:
            raise JokeNotFoundError(joke_id)
        return "Joke deleted"
