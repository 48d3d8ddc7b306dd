import json
import random

import ReviewModule.review_session as rs
from FlashcardsModule import FlashcardSaveError
from ReviewModule import run_review


def test_review_updates_live_cards_and_scores(store, fake_ui, deck_path):
    store.add("Q1", "A1", "Math")
    store.add("Q2", "A2", "Math")
    store.add("Q3", "A3", "Art")
    ui = fake_ui(confirms=[True, False])

    result = run_review(store, ui, "math", rng=random.Random(1))

    assert result.correct == 1
    assert result.total == 2
    assert result.score == 50.0
    reviewed = [c for c in store.flashcards if c.category == "Math"]
    assert all(c.times_reviewed == 1 for c in reviewed)
    assert all(c.last_reviewed is not None for c in reviewed)
    assert sum(c.times_correct for c in reviewed) == 1
    assert store.find_by_id(3).times_reviewed == 0
    assert ui.of_kind("info")[-1] == "Review complete! You got 1/2 correct (50.0%)."

    saved = {c["id"]: c for c in json.loads(deck_path.read_text(encoding="utf-8"))}
    assert saved[1]["times_reviewed"] == 1
    assert "last_reviewed" in saved[2]


def test_review_shows_all_answers_and_options(store, fake_ui):
    store.add("Pick primes", "2", "", ["2", "3", "4"], ["2", "3"])
    ui = fake_ui(confirms=[True])

    run_review(store, ui, option_rng=random.Random(0))

    shown = ui.of_kind("show")
    assert "\nCorrect answers:" in shown
    assert "-  2" in shown and "-  3" in shown
    numbered = [s for s in shown if s[:3] in ("1. ", "2. ", "3. ")]
    assert sorted(s[3:] for s in numbered) == ["2", "3", "4"]
    assert [p[0] for p in ui.prompts] == ["pause", "pause", "confirm"]


def test_review_empty_selection_is_a_no_op(store, fake_ui):
    store.add("Q1", "A1", "Math")
    ui = fake_ui()
    assert run_review(store, ui, "Biology") is None
    assert ui.of_kind("warning") == ["No cards to review in this selection."]
    assert ui.prompts == []


def test_review_reports_missing_live_card(store, fake_ui, monkeypatch):
    store.add("Q1", "A1")
    ui = fake_ui(confirms=[True])
    monkeypatch.setattr(store, "find_by_id", lambda card_id: None)

    result = run_review(store, ui)

    assert result.total == 1
    assert any("Could not find card with ID 1" in m for m in ui.of_kind("error"))


def test_review_save_failure_is_reported(store, fake_ui, monkeypatch):
    store.add("Q1", "A1")
    ui = fake_ui(confirms=[False])

    def failing_save():
        raise FlashcardSaveError("disk full")

    monkeypatch.setattr(store, "save", failing_save)
    result = run_review(store, ui)

    assert result.score == 0.0
    assert store.find_by_id(1).times_reviewed == 1
    assert any("Failed to save review results" in m for m in ui.of_kind("error"))


def test_reveal_falls_back_to_answer(fake_ui):
    class Card:
        correct_answers = []
        answer = "fallback"

    ui = fake_ui()
    rs._reveal_answers(Card(), ui)
    assert ui.of_kind("show") == ["\nAnswer: fallback"]
