from app.models.models import Joke

__all__ = ["Joke"]
