import logging
from typing import Any, Dict

import requests

from app.client.voted import VotedJokeStore

logger = logging.getLogger(__name__)


class ClientRequestError(Exception):
    pass


class JokeClient:
    """Terminal counterpart of the browser client in ``public/app.js``.

    Holds the currently displayed joke and mirrors the browser's actions:
    fetch, vote once per joke, add, and delete. Failures never raise; they
    set ``error`` to a fixed message and abandon the action.
    """

    def __init__(self, base_url: str, voted_store: VotedJokeStore, session=None, timeout: float | None = 10.0):
        self.base_url = base_url.rstrip("/")
        self.voted_store = voted_store
        self.session = session or requests.Session()
        self.timeout = timeout

        self.joke: Dict[str, Any] | None = None
        self.loading = False
        self.error: str | None = None
        self.voted = False
        self.new_question = ""
        self.new_answer = ""

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            response = self.session.request(method, f"{self.base_url}{path}", **kwargs)
        except requests.RequestException as exc:
            raise ClientRequestError(str(exc)) from exc
        if response.status_code >= 400:
            raise ClientRequestError(f"{method} {path} returned {response.status_code}")
        try:
            data = response.json()
        except ValueError as exc:
            raise ClientRequestError(f"{method} {path} returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise ClientRequestError(f"{method} {path} returned {type(data).__name__}, expected an object")
        return data

    def fetch_joke(self) -> None:
        self.loading = True
        self.error = None
        self.voted = False
        try:
            data = self._request("GET", "/api/joke")
            self.joke = data
            self.voted = self.voted_store.has_voted(data["id"])
        except (ClientRequestError, KeyError) as exc:
            logger.warning("Fetch joke error: %s", exc)
            self.error = "Failed to fetch joke"
        self.loading = False

    def vote(self, emoji: str) -> None:
        if not self.joke or self.voted:
            return
        joke_id = self.joke["id"]
        try:
            result = self._request("POST", f"/api/joke/{joke_id}/vote", json={"emoji": emoji})
        except ClientRequestError as exc:
            logger.warning("Vote error: %s", exc)
            self.error = "Failed to vote"
            return
        self.joke = {**self.joke, "votes": result.get("votes") or {}}
        self.voted_store.mark_voted(joke_id)
        self.voted = True

    def add_joke(self) -> None:
        if not self.new_question.strip() or not self.new_answer.strip():
            return
        try:
            self._request("POST", "/api/joke", json={"question": self.new_question, "answer": self.new_answer})
        except ClientRequestError as exc:
            logger.warning("Add joke error: %s", exc)
            self.error = "Failed to add joke"
            return
        self.new_question = ""
        self.new_answer = ""
        self.fetch_joke()

    def delete_joke(self) -> None:
        if not self.joke:
            return
        try:
            self._request("DELETE", f"/api/joke/{self.joke['id']}")
        except ClientRequestError as exc:
            logger.warning("Delete joke error: %s", exc)
            self.error = "Failed to delete joke"
            return
        self.fetch_joke()
