import pytest
import requests

from app.exceptions import JokeSourceError
from app.services import joke_source as joke_source_module
from app.services.joke_source import ExternalJokeSource


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self.payload is None:
            raise ValueError("no JSON")
        return self.payload


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(result):
        def _get(url, timeout=None):
            calls.append((url, timeout))
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(joke_source_module.requests, "get", _get)
        return calls

    return install


def test_fetch_random_parses_joke(fake_get):
    calls = fake_get(FakeResponse({"id": 17, "question": "Why?", "answer": "Why not.", "extra": "ignored"}))

    joke = ExternalJokeSource("https://jokes.test/api/joke", timeout=2.5).fetch_random()

    assert (joke.id, joke.question, joke.answer) == (17, "Why?", "Why not.")
    assert calls == [("https://jokes.test/api/joke", 2.5)]


@pytest.mark.parametrize(
    "result",
    [
        FakeResponse({"error": "down"}, status_code=503),
        requests.ConnectionError("connection refused"),
        requests.Timeout("timed out"),
        FakeResponse(None),
        FakeResponse({"question": "No id", "answer": "here"}),
        FakeResponse(["not", "an", "object"]),
    ],
)
def test_fetch_random_failures_raise_source_error(fake_get, result):
    fake_get(result)
    with pytest.raises(JokeSourceError):
        ExternalJokeSource().fetch_random()
