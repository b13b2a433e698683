"""Client for the public joke API used to seed an empty store."""

import logging

import requests
from pydantic import ValidationError

from app import schemas
from app.exceptions import JokeSourceError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://teehee.dev/api/joke"


class ExternalJokeSource:
    def __init__(self, url: str = DEFAULT_API_URL, timeout: float = 5.0):
        self.url = url
        self.timeout = timeout

    def fetch_random(self) -> schemas.ExternalJoke:
        """Call the public API and extract the id/question/answer fields."""
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            joke_data = response.json()
        except requests.RequestException as exc:
            logger.warning("Joke API request to %s failed: %s", self.url, exc)
            raise JokeSourceError("Failed to fetch external joke", exc) from exc
        except ValueError as exc:
            raise JokeSourceError("Joke API returned invalid JSON", exc) from exc

        try:
            return schemas.ExternalJoke.model_validate(joke_data)
        except ValidationError as exc:
            logger.warning("Joke API returned an unexpected payload: %r", joke_data)
            raise JokeSourceError("Joke API returned an unexpected payload", exc) from exc
