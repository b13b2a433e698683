import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class VotedJokeStore:
    """Remembers which jokes this client has voted on, across restarts.

    Entries are kept in a small JSON object keyed ``voted_<id>``, the same
    keys the browser client writes to ``localStorage``.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._entries = self._load()

    @staticmethod
    def _key(joke_id: int) -> str:
        return f"voted_{joke_id}"

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable voted store %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def has_voted(self, joke_id: int) -> bool:
        return self._entries.get(self._key(joke_id)) == "true"

    def mark_voted(self, joke_id: int) -> None:
        self._entries[self._key(joke_id)] = "true"
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._entries, indent=2), encoding="utf-8")
