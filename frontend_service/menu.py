"""Interactive main menu tying the deck, the sessions and the terminal together."""
from __future__ import annotations

import logging
import random
from typing import Optional

from FlashcardsModule import FlashcardSaveError, FlashcardStore
from QuizModule import run_quiz
from ReviewModule import run_review
from tools.selection import select_cards

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "[All Categories]"
DEFAULT_QUIZ_SIZE = 5
TABLE_HEADERS = ["ID", "Category", "Question", "Answer(s)", "Type", "Reviewed", "Correct %"]

MENU_OPTIONS = [
    "1. Add new flashcard",
    "2. Review flashcards",
    "3. Quiz mode",
    "4. List flashcards",
    "5. Delete a flashcard",
    "6. Exit",
]


def _shorten(text: str, limit: int, keep: int) -> str:
    if len(text) > limit:
        return text[:keep] + "..."
    return text


def card_table_rows(cards) -> list[list[str]]:
    """Build the rows of the card listing, ordered by id."""
    rows = []
    for card in sorted(cards, key=lambda c: c.id):
        answer_text = card.answer
        if len(card.correct_answers) > 1:
            answer_text = f"{card.correct_answers[0]} (+{len(card.correct_answers) - 1} more)"
        elif len(card.correct_answers) == 1:
            answer_text = card.correct_answers[0]

        accuracy = card.accuracy
        rows.append([
            str(card.id),
            _shorten(card.category, 15, 12),
            _shorten(card.question, 40, 37),
            _shorten(answer_text, 30, 27),
            "Multiple Choice" if card.is_multiple_choice else "Text",
            str(card.times_reviewed),
            "N/A" if accuracy is None else f"{accuracy:.0f}%",
        ])
    return rows


class FlashcardApp:
    """
    Menu loop over a single deck.

    Parameters
    ----------
    store:
        The loaded ``FlashcardStore``.
    ui:
        Terminal adapter offering the prompt and notification calls.
    rng, option_rng:
        Random sources for picking cards and for ordering options.
    quiz_delay:
        Seconds to wait after each quiz answer.
    """

    def __init__(
        self,
        store: FlashcardStore,
        ui,
        rng: Optional[random.Random] = None,
        option_rng: Optional[random.Random] = None,
        quiz_delay: float = 0.5,
    ):
        self.store = store
        self.ui = ui
        self.rng = rng or random.Random()
        self.option_rng = option_rng or random.Random()
        self.quiz_delay = quiz_delay

    def run(self):
        actions = {
            "1": self.add_card_flow,
            "2": self.review_flow,
            "3": self.quiz_flow,
            "4": self.list_flow,
            "5": self.delete_flow,
        }
        while True:
            self.ui.header(f"=== FLASHCARD APP ('{self.store.file_path}') ===")
            selected = self.ui.select_one("Select an action", MENU_OPTIONS)
            if not selected:
                self.ui.warning("No action selected.")
                continue

            choice = selected.split(".")[0]
            if choice == "6":
                self.ui.info("Goodbye!")
                return
            action = actions.get(choice)
            if action is None:
                self.ui.warning("Invalid selection.")
            else:
                action()
            self.ui.show("")

    # -- category picking ---------------------------------------------------
    def select_category(self, prompt: str, allow_all: bool = True) -> str:
        """Ask for a category; ``""`` means every category."""
        categories = self.store.categories()
        if not categories and not allow_all:
            self.ui.warning("No categories available yet.")
            return ""

        options = [ALL_CATEGORIES] if allow_all else []
        options.extend(categories)

        selected = self.ui.select_one(prompt, options)
        if allow_all and selected == ALL_CATEGORIES:
            return ""
        if not selected:
            self.ui.warning("No category selected.")
            return ""
        return selected

    # -- actions ------------------------------------------------------------
    def _collect_options(self):
        options, correct = [], []
        self.ui.info("Enter options (type 'done' when finished, need at least 2):")
        while True:
            text = self.ui.text_input(f"Option {len(options) + 1}")
            if text.strip().lower() == "done":
                if len(options) < 2:
                    self.ui.warning("Need at least 2 options for multiple choice. Please add more.")
                    continue
                return options, correct
            if not text.strip():
                self.ui.warning("Option cannot be empty. Please enter text or type 'done'.")
                continue
            options.append(text)
            if self.ui.confirm(f"Is '{text}' a correct answer?", default=False):
                correct.append(text)

    def add_card_flow(self):
        question = self.ui.text_input("Enter question")
        while not question.strip():
            self.ui.warning("Question cannot be empty.")
            question = self.ui.text_input("Enter question")
        answer = self.ui.text_input("Enter the 'main' answer (used if not multiple choice)")
        category = self.ui.text_input("Enter category (leave blank for 'General')", default="")

        options, correct = [], []
        if self.ui.confirm("Make this a multiple choice question?", default=False):
            options, correct = self._collect_options()
            if not correct:
                self.ui.warning(
                    f"No correct answer specified for multiple choice. "
                    f"Defaulting to first option: '{options[0]}'"
                )

        try:
            card = self.store.add(question, answer, category, options, correct)
        except ValueError as e:
            self.ui.error(str(e))
            return None
        except FlashcardSaveError as e:
            self.ui.error(f"Card kept in memory but not saved: {e}")
            return None
        self.ui.success(
            f"Added new card (ID: {card.id}) to '{self.store.file_path}': {card.question}"
        )
        return card

    def review_flow(self):
        if len(self.store) == 0:
            self.ui.warning("No cards to review yet. Add some first!")
            return None
        category = self.select_category("Select category to review")
        return run_review(self.store, self.ui, category, rng=self.rng, option_rng=self.option_rng)

    def quiz_flow(self):
        if len(self.store) == 0:
            self.ui.warning("No cards for a quiz yet. Add some first!")
            return None
        category = self.select_category("Select category for quiz")
        raw = self.ui.text_input("Number of questions", default=str(DEFAULT_QUIZ_SIZE))
        try:
            num = int(raw.strip())
        except ValueError:
            num = 0
        if num <= 0:
            self.ui.warning(f"Invalid number of questions, defaulting to {DEFAULT_QUIZ_SIZE}.")
            num = DEFAULT_QUIZ_SIZE
        return run_quiz(
            self.store,
            self.ui,
            category,
            num,
            rng=self.rng,
            option_rng=self.option_rng,
            delay=self.quiz_delay,
        )

    def list_cards(self, category_filter: str = "") -> list[list[str]]:
        cards = select_cards(self.store.flashcards, category_filter)
        if not cards:
            if category_filter:
                self.ui.warning(
                    f"No cards found in category '{category_filter}' in '{self.store.file_path}'."
                )
            else:
                self.ui.warning(f"No flashcards available in '{self.store.file_path}'.")
            return []
        rows = card_table_rows(cards)
        self.ui.table(TABLE_HEADERS, rows)
        return rows

    def list_flow(self):
        if len(self.store) == 0:
            self.ui.warning("No cards to list yet.")
            return
        self.list_cards(self.select_category("Select category to list"))

    def delete_flow(self) -> bool:
        if len(self.store) == 0:
            self.ui.warning("No cards to delete.")
            return False
        self.ui.info("Current cards:")
        self.list_cards()

        raw = self.ui.text_input("Enter ID of card to delete")
        try:
            card_id = int(raw.strip())
        except ValueError:
            self.ui.error("Invalid ID entered.")
            return False

        card = self.store.find_by_id(card_id)
        if card is None:
            self.ui.error(f"Card with ID {card_id} not found in '{self.store.file_path}'.")
            return False
        try:
            self.store.delete(card_id)
        except FlashcardSaveError as e:
            self.ui.error(f"Card removed from memory but not saved: {e}")
            return False
        self.ui.success(
            f"Deleted card (ID: {card_id}) from '{self.store.file_path}': {card.question}"
        )
        return True
