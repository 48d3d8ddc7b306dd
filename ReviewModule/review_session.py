"""Self-assessed review sessions.

Every selected card is shown once in random order, its answers are revealed
and the learner says whether they knew it.  The verdict is written back to
the store and the deck is saved when the pass is over.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from tools.scoring import SessionResult, accepted_answers, record_attempt, save_session
from tools.selection import select_cards, shuffle_cards

logger = logging.getLogger(__name__)


def _reveal_answers(card, ui):
    answers = accepted_answers(card)
    if len(answers) > 1:
        ui.show("\nCorrect answers:", style="bright_green")
        for ans in answers:
            ui.show(f"-  {ans}", style="green")
    else:
        ui.show(f"\nAnswer: {answers[0]}", style="bright_green")


def run_review(
    store,
    ui,
    category_filter: str = "",
    rng: Optional[random.Random] = None,
    option_rng: Optional[random.Random] = None,
) -> Optional[SessionResult]:
    """
    Review the cards of ``category_filter`` (all cards when empty).

    Returns the session result, or ``None`` when nothing was selected.
    """
    option_rng = option_rng or random.Random()
    cards = select_cards(store.flashcards, category_filter)
    if category_filter:
        ui.info(
            f"Reviewing {len(cards)} cards in category '{category_filter}' from '{store.file_path}'."
        )
    else:
        ui.info(f"Reviewing all {len(cards)} cards from '{store.file_path}'.")

    if not cards:
        ui.warning("No cards to review in this selection.")
        return None

    cards = shuffle_cards(cards, rng)
    total = len(cards)
    correct_count = 0

    for i, card in enumerate(cards, start=1):
        ui.section(f"Card {i}/{total} - Category: {card.category}")
        ui.show(f"Question: {card.question}", style="bright_blue")

        if card.is_multiple_choice:
            ui.show("\n(Multiple Choice Question)", style="yellow")
            ui.pause("Press Enter to see answer options...")
            for j, option in enumerate(shuffle_cards(card.options, option_rng), start=1):
                ui.show(f"{j}. {option}", style="cyan")
            ui.pause("Press Enter to see the correct answer(s)...")
        else:
            ui.pause("Press Enter to see the answer...")

        _reveal_answers(card, ui)

        knew_it = ui.confirm("Did you get it right?", default=True)
        if knew_it:
            correct_count += 1
        if record_attempt(store, card, knew_it, ui):
            if knew_it:
                ui.success("Marked as correct!")
            else:
                ui.warning("Marked as incorrect.")
        ui.show("")

    save_session(store, ui, "review")
    result = SessionResult(correct=correct_count, total=total)
    logger.info("Review finished: %d/%d correct", result.correct, result.total)
    ui.info(
        f"Review complete! You got {result.correct}/{result.total} correct ({result.score:.1f}%)."
    )
    return result
