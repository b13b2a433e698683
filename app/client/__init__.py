from app.client.client import ClientRequestError, JokeClient
from app.client.voted import VotedJokeStore

__all__ = ["ClientRequestError", "JokeClient", "VotedJokeStore"]
