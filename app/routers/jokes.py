from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.orm import Session

from app import schemas
from app.database import get_db
from app.services.jokes import JokeService

router = APIRouter(prefix="/api/joke", tags=["jokes"])

# Ids are stored as 64-bit integers
MAX_JOKE_ID = 2**63 - 1


def get_joke_service(request: Request, db: Session = Depends(get_db)) -> JokeService:
    state = request.app.state
    return JokeService(db, state.joke_source, state.settings.available_votes)


@router.get("", response_model=schemas.JokeOfTheDay)
def get_random_joke(service: JokeService = Depends(get_joke_service)):
    return service.get_random_joke()


@router.post("", response_model=schemas.JokeRead)
def create_joke(payload: schemas.JokeCreate, service: JokeService = Depends(get_joke_service)):
    return service.create_joke(payload.question, payload.answer)


@router.get("/{joke_id}", response_model=schemas.JokeOfTheDay)
def get_joke(joke_id: int = Path(ge=1, le=MAX_JOKE_ID), service: JokeService = Depends(get_joke_service)):
    return service.get_joke(joke_id)


@router.post("/{joke_id}/vote", response_model=schemas.VoteResponse)
def vote_joke(
    payload: schemas.VoteRequest,
    joke_id: int = Path(ge=1, le=MAX_JOKE_ID),
    service: JokeService = Depends(get_joke_service),
):
    votes = service.vote_joke(joke_id, payload.emoji)
    return schemas.VoteResponse(message="Vote added", votes=votes)


@router.delete("/{joke_id}", response_model=schemas.MessageResponse)
def delete_joke(joke_id: int = Path(ge=1, le=MAX_JOKE_ID), service: JokeService = Depends(get_joke_service)):
    return schemas.MessageResponse(message=service.delete_joke(joke_id))
