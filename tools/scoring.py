from __future__ import annotations

import logging
from dataclasses import dataclass

from FlashcardsModule.flashcards import FlashcardSaveError

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Outcome of a finished review or quiz session."""

    correct: int
    total: int

    @property
    def score(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct / self.total * 100


def accepted_answers(card) -> list[str]:
    """Answers shown to the user for ``card``, falling back to ``card.answer``."""
    if card.correct_answers:
        return list(card.correct_answers)
    return [card.answer]


def record_attempt(store, card, correct: bool, ui) -> bool:
    """Write one attempt back to the store's live copy of ``card``.

    Session cards are snapshots, so the live record is looked up by id.  A
    missing record is reported through ``ui`` and ``False`` is returned.
    """
    live = store.find_by_id(card.id)
    if live is None:
        logger.error("Card %d vanished from the store during a session", card.id)
        ui.error(f"Could not find card with ID {card.id} in main list to update stats.")
        return False
    live.record_result(correct)
    return True


def save_session(store, ui, what: str) -> bool:
    """Persist the store after a session; failures are reported, not raised."""
    try:
        store.save()
    except FlashcardSaveError as e:
        ui.error(f"Failed to save {what} results: {e}")
        return False
    return True
