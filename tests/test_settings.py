import json

import main
from FlashcardsModule import FlashcardStore
from tools.settings import DEFAULT_FILE, load_settings


def clear_env(monkeypatch):
    for name in (
        "FLASHCARDS_FILE",
        "FLASHCARDS_LOG_LEVEL",
        "FLASHCARDS_LOG_FILE",
        "FLASHCARDS_SEED",
        "FLASHCARDS_QUIZ_DELAY",
    ):
        # setenv first so monkeypatch also undoes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    settings = load_settings([], dotenv_path=str(tmp_path / "missing.env"))
    assert settings.file_path == DEFAULT_FILE
    assert settings.log_level == "WARNING"
    assert settings.seed is None
    assert settings.quiz_delay == 0.5


def test_file_flag_overrides_environment(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    monkeypatch.setenv("FLASHCARDS_FILE", "from_env.json")
    assert load_settings([], dotenv_path=str(tmp_path / "x.env")).file_path == "from_env.json"
    settings = load_settings(["--file", "cli.json"], dotenv_path=str(tmp_path / "x.env"))
    assert settings.file_path == "cli.json"


def test_dotenv_and_invalid_numbers(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    env = tmp_path / ".env"
    env.write_text(
        "FLASHCARDS_SEED=12\nFLASHCARDS_QUIZ_DELAY=soon\nFLASHCARDS_LOG_LEVEL=debug\n",
        encoding="utf-8",
    )
    settings = load_settings([], dotenv_path=str(env))
    assert settings.seed == 12
    assert settings.quiz_delay == 0.5
    assert settings.log_level == "DEBUG"


def test_open_store_recovers_from_malformed_file(tmp_path, fake_ui):
    path = tmp_path / "deck.json"
    path.write_text("[{]", encoding="utf-8")
    ui = fake_ui()
    store = main.open_store(str(path), ui)
    assert isinstance(store, FlashcardStore)
    assert len(store) == 0
    assert ui.of_kind("warning") == ["Could not load existing cards. Starting with an empty set."]
    assert ui.of_kind("error")[0].startswith("Error decoding flashcard JSON")


def test_open_store_reports_loaded_cards(tmp_path, fake_ui):
    path = tmp_path / "deck.json"
    FlashcardStore(str(path)).add("Q", "A")
    ui = fake_ui()
    store = main.open_store(str(path), ui)
    assert len(store) == 1
    assert ui.of_kind("info") == [f"Loaded 1 flashcards from '{path}'."]


def test_main_runs_menu_until_exit(monkeypatch, tmp_path, fake_ui):
    clear_env(monkeypatch)
    path = tmp_path / "deck.json"
    ui = fake_ui(
        selections=["1. Add new flashcard", "6. Exit"],
        texts=["2+2?", "4", ""],
        confirms=[False],
    )
    monkeypatch.setattr(main, "ConsoleUI", lambda: ui)
    monkeypatch.setattr(main, "configure_logging", lambda *a, **k: None)

    assert main.main(["--file", str(path)]) == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0]["question"] == "2+2?"
    assert data[0]["correct_answers"] == ["4"]


def test_open_store_recovers_from_undecodable_file(tmp_path, fake_ui):
    path = tmp_path / "deck.json"
    path.write_bytes(b'[{"id": 1, "question": "\xff\xfe"}]')
    ui = fake_ui()
    store = main.open_store(str(path), ui)
    assert len(store) == 0
    assert ui.of_kind("warning") == ["Could not load existing cards. Starting with an empty set."]
    assert ui.of_kind("error")[0].startswith("Error reading flashcard file")
