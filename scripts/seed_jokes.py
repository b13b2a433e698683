import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.config import settings
from app.database import JokeStore, create_db_engine
from app.models import Joke


JOKES = [
    {"question": "Why do programmers prefer dark mode?", "answer": "Because light attracts bugs."},
    {"question": "Why don't scientists trust atoms?", "answer": "Because they make up everything."},
    {"question": "What do you call a fake noodle?", "answer": "An impasta."},
    {"question": "How does a penguin build its house?", "answer": "Igloos it together."},
    {"question": "Why did the scarecrow win an award?", "answer": "He was outstanding in his field."},
]


def main() -> None:
    store = JokeStore(create_db_engine(settings.sqlalchemy_url))
    store.open()
    session = store.session()
    try:
        added = 0
        for joke_data in JOKES:
            existing = session.query(Joke).filter(Joke.question == joke_data["question"]).first()
            if existing:
                existing.answer = joke_data["answer"]
            else:
                session.add(Joke(question=joke_data["question"], answer=joke_data["answer"], votes={}))
                added += 1
        session.commit()
        print(f"Seeded {added} new jokes ({len(JOKES)} total in seed list)")
    finally:
        session.close()
        store.close()


if __name__ == "__main__":
    main()
