import importlib.util
from pathlib import Path

from app.config import Settings

CLI_PATH = Path(__file__).resolve().parents[1] / "scripts" / "joke_cli.py"


def load_cli():
    spec = importlib.util.spec_from_file_location("joke_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_cli_emoji_fallback_matches_settings_default():
    assert load_cli().EMOJI == Settings.model_fields["available_votes"].default
