"""Terminal client for the joke API: shows a joke and lets you vote, add or delete."""

import argparse
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.client import JokeClient, VotedJokeStore
from app.config import Settings

DEFAULT_STATE_FILE = Path.home() / ".joke_of_the_day" / "voted.json"
EMOJI = Settings.model_fields["available_votes"].default


def show(client: JokeClient) -> None:
    if client.error:
        print(client.error)
        return
    joke = client.joke
    if not joke:
        return
    print(f"\n{joke['question']}\n  {joke['answer']}")
    counts = "  ".join(f"[{i}] {emoji} {joke['votes'].get(emoji, 0)}" for i, emoji in enumerate(joke.get("availableVotes") or EMOJI))
    print(counts + ("  (voted)" if client.voted else ""))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default="http://localhost:5000")
    parser.add_argument("--state-file", default=str(DEFAULT_STATE_FILE))
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)
    client = JokeClient(args.url, VotedJokeStore(args.state_file))
    client.fetch_joke()

    while True:
        show(client)
        choice = input("\n[n]ext, [0-9] vote, [a]dd, [d]elete, [q]uit > ").strip().lower()
        if choice == "q":
            break
        if choice == "n":
            client.fetch_joke()
        elif choice.isdigit() and client.joke:
            options = client.joke.get("availableVotes") or EMOJI
            if int(choice) < len(options):
                client.vote(options[int(choice)])
        elif choice == "a":
            client.new_question = input("Question: ")
            client.new_answer = input("Answer: ")
            client.add_joke()
        elif choice == "d":
            client.delete_joke()


if __name__ == "__main__":
    main()
