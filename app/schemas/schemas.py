from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ExternalJoke",
    "JokeCreate",
    "JokeOfTheDay",
    "JokeRead",
    "MessageResponse",
    "VoteRequest",
    "VoteResponse",
]


class JokeBase(BaseModel):
    question: str
    answer: str


class JokeCreate(JokeBase):
    pass


class JokeRead(JokeBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    votes: Dict[str, int] = Field(default_factory=dict)


class JokeOfTheDay(JokeRead):
    available_votes: List[str] = Field(default_factory=list, serialization_alias="availableVotes")


class ExternalJoke(JokeBase):
    """Payload returned by the upstream joke API."""

    id: int


class VoteRequest(BaseModel):
    emoji: str


class VoteResponse(BaseModel):
    message: str
    votes: Dict[str, int]


class MessageResponse(BaseModel):
    message: str
