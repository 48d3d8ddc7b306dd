from __future__ import annotations

import logging
import random
import time
from typing import Optional

from tools.scoring import SessionResult, accepted_answers, record_attempt, save_session
from tools.selection import select_cards, shuffle_cards

logger = logging.getLogger(__name__)


def prepare_quiz_cards(cards, num_questions: int, rng: Optional[random.Random] = None) -> list:
    """Pick ``num_questions`` distinct cards at random (fewer if not enough)."""
    if num_questions <= 0:
        return []
    return shuffle_cards(cards, rng)[:num_questions]


def is_correct_answer(user_answer: str, correct_answers) -> bool:
    wanted = user_answer.lower()
    return any(wanted == ans.lower() for ans in correct_answers)


def _option_text(selected: str) -> str:
    parts = selected.split(". ", 1)
    if len(parts) == 2:
        return parts[1]
    return selected


def _ask_multiple_choice(card, ui, option_rng) -> str:
    shuffled = shuffle_cards(card.options, option_rng)
    choices = [f"{j}. {option}" for j, option in enumerate(shuffled, start=1)]
    return _option_text(ui.select_one("Select your answer", choices))


def run_quiz(
    store,
    ui,
    category_filter: str = "",
    num_questions: int = 5,
    rng: Optional[random.Random] = None,
    option_rng: Optional[random.Random] = None,
    delay: float = 0.5,
) -> Optional[SessionResult]:
    """
    Quiz the learner on up to ``num_questions`` random cards.

    Text cards are answered by typing, multiple-choice cards by picking an
    option; both are matched against the accepted answers ignoring case.
    Returns ``None`` when the selection is empty or the count is not positive.
    """
    option_rng = option_rng or random.Random()
    source = select_cards(store.flashcards, category_filter)
    if category_filter:
        ui.info(
            f"Starting quiz with cards from category '{category_filter}' in '{store.file_path}'."
        )
    else:
        ui.info(f"Starting quiz with cards from all categories in '{store.file_path}'.")

    if not source:
        ui.warning("No cards available for the quiz in this selection.")
        return None
    if num_questions > len(source):
        num_questions = len(source)
        ui.info(f"Reduced quiz size to {num_questions} questions (maximum available).")
    if num_questions <= 0:
        ui.warning("Number of questions must be positive.")
        return None

    quiz_cards = prepare_quiz_cards(source, num_questions, rng)
    correct_count = 0

    ui.header(f"QUIZ MODE: {num_questions} questions from {store.file_path}")

    for i, card in enumerate(quiz_cards, start=1):
        ui.section(f"Question {i}/{num_questions}")
        ui.show(card.question, style="bright_blue")

        if card.is_multiple_choice:
            user_answer = _ask_multiple_choice(card, ui, option_rng)
        else:
            user_answer = ui.text_input("Your answer").strip()

        correct = is_correct_answer(user_answer, card.correct_answers)
        record_attempt(store, card, correct, ui)

        if correct:
            correct_count += 1
            ui.success("Correct! ✓")
        else:
            answers = accepted_answers(card)
            if len(answers) > 1:
                ui.error(f"Incorrect. The correct answers were: {', '.join(answers)}")
            else:
                ui.error(f"Incorrect. The correct answer was: {answers[0]}")

        if delay:
            time.sleep(delay)
        ui.show("")

    save_session(store, ui, "quiz")
    result = SessionResult(correct=correct_count, total=num_questions)
    logger.info("Quiz finished: %d/%d correct", result.correct, result.total)
    ui.info(f"Quiz complete! You scored {result.correct}/{result.total} ({result.score:.1f}%).")
    return result
