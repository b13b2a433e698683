from sqlalchemy import JSON, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Joke(Base):
    __tablename__ = "jokes"

    # Backfilled jokes keep the id assigned by the external source
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    votes: Mapped[dict[str, int]] = mapped_column(JSON, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"Joke(id={self.id!r}, question={self.question!r})"
