"""Flashcard records and their JSON-backed store.

The module provides the ``Flashcard`` record, the ``FlashcardStore`` that
owns every card of a single deck file, and the exceptions raised when that
file cannot be read or written.  The store is the only place that assigns
ids and touches the file on disk.
"""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"
_FRACTION = re.compile(r"\.(\d+)")


class FlashcardError(Exception):
    """Base exception class for Flashcard-related errors."""


class FlashcardLoadError(FlashcardError):
    """Raised when the deck file exists but cannot be read or decoded."""


class FlashcardSaveError(FlashcardError):
    """Raised when the deck file cannot be written."""


def _now() -> datetime:
    return datetime.now().astimezone()


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    return datetime.fromisoformat(value)


@dataclass
class Flashcard:
    """
    Represents a single flashcard with its accepted answers and statistics.

    A card with an empty ``options`` list is answered by typing; a card with
    options is a multiple-choice card and every entry of ``correct_answers``
    is one of its options.
    """

    id: int
    question: str
    answer: str
    correct_answers: list[str]
    options: list[str] = field(default_factory=list)
    category: str = DEFAULT_CATEGORY
    created_at: datetime = field(default_factory=_now)
    last_reviewed: Optional[datetime] = None
    times_reviewed: int = 0
    times_correct: int = 0

    @property
    def is_multiple_choice(self) -> bool:
        return len(self.options) > 0

    @property
    def accuracy(self) -> Optional[float]:
        """Percentage of reviews answered correctly, ``None`` if never reviewed."""
        if self.times_reviewed == 0:
            return None
        return self.times_correct / self.times_reviewed * 100

    def record_result(self, correct: bool, when: Optional[datetime] = None):
        """Count one review or quiz exposure of this card."""
        self.times_reviewed += 1
        self.last_reviewed = when or _now()
        if correct:
            self.times_correct += 1

    def to_dict(self):
        data = {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "correct_answers": list(self.correct_answers),
        }
        if self.options:
            data["options"] = list(self.options)
        data["category"] = self.category
        data["created_at"] = self.created_at.isoformat()
        if self.last_reviewed is not None:
            data["last_reviewed"] = self.last_reviewed.isoformat()
        data["times_reviewed"] = self.times_reviewed
        data["times_correct"] = self.times_correct
        return data

    @staticmethod
    def from_dict(data):
        answer = str(data.get("answer", ""))
        return Flashcard(
            id=int(data["id"]),
            question=str(data["question"]),
            answer=answer,
            correct_answers=[str(a) for a in data.get("correct_answers") or [answer]],
            options=[str(o) for o in data.get("options") or []],
            category=str(data.get("category") or DEFAULT_CATEGORY),
            created_at=_parse_timestamp(data.get("created_at")) or _now(),
            last_reviewed=_parse_timestamp(data.get("last_reviewed")),
            times_reviewed=int(data.get("times_reviewed", 0)),
            times_correct=int(data.get("times_correct", 0)),
        )


class FlashcardStore:
    """
    Owns every flashcard of one deck file.

    Parameters
    ----------
    file_path:
        Location of the JSON deck.  Nothing is read until ``load`` is called.

    Cards are kept in insertion order keyed by id.  ``max_id`` is the highest
    id ever handed out and never goes down, so deleted ids are not reused.
    """

    def __init__(self, file_path: str = "flashcards.json"):
        self.file_path = file_path
        self._cards: dict[int, Flashcard] = {}
        self.max_id = 0

    def __len__(self):
        return len(self._cards)

    @property
    def flashcards(self) -> list[Flashcard]:
        return list(self._cards.values())

    def _reset(self):
        self._cards = {}
        self.max_id = 0

    def load(self) -> int:
        """
        Load the deck from ``file_path`` and return the number of cards read.

        A missing or empty file yields an empty deck.  An unreadable or
        malformed file also leaves the deck empty but raises
        ``FlashcardLoadError`` so the caller can tell the user.
        """
        self._reset()
        if not os.path.exists(self.file_path):
            logger.info("Flashcard file '%s' not found, starting empty", self.file_path)
            return 0

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading flashcard file '%s': %s", self.file_path, e)
            raise FlashcardLoadError(
                f"Error reading flashcard file '{self.file_path}': {e}"
            ) from e

        if not raw.strip():
            logger.info("Flashcard file '%s' is empty, starting empty", self.file_path)
            return 0

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array of flashcards")
            cards = [Flashcard.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Error decoding flashcard JSON from '%s': %s", self.file_path, e)
            raise FlashcardLoadError(
                f"Error decoding flashcard JSON from '{self.file_path}': {e}"
            ) from e

        self.max_id = max((card.id for card in cards), default=0)
        for card in cards:
            if card.id in self._cards:
                old_id, card.id = card.id, self.next_id()
                logger.warning(
                    "Duplicate card id %d in '%s', renumbered to %d", old_id, self.file_path, card.id
                )
            self._cards[card.id] = card
        logger.info("Loaded %d flashcards from '%s'", len(self._cards), self.file_path)
        return len(self._cards)

    def save(self):
        """Write the whole deck to ``file_path``."""
        payload = [card.to_dict() for card in self._cards.values()]
        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error("Error writing flashcard file '%s': %s", self.file_path, e)
            raise FlashcardSaveError(
                f"Error writing flashcard file '{self.file_path}': {e}"
            ) from e
        logger.debug("Saved %d flashcards to '%s'", len(payload), self.file_path)

    def next_id(self) -> int:
        self.max_id += 1
        return self.max_id

    def add(
        self,
        question: str,
        answer: str,
        category: str = "",
        options: Optional[list[str]] = None,
        correct_answers: Optional[list[str]] = None,
    ) -> Flashcard:
        """
        Create a card, persist the deck and return the new card.

        Free-text cards always accept exactly ``answer``.  A multiple-choice
        card without any marked answer accepts its first option.  If saving
        fails the card stays in the deck and ``FlashcardSaveError`` is raised.
        """
        if not question or not question.strip():
            raise ValueError("Question cannot be empty.")
        options = list(options or [])
        correct_answers = list(correct_answers or [])
        category = category.strip() if category else ""
        if not category:
            category = DEFAULT_CATEGORY

        if options:
            if len(options) < 2:
                raise ValueError("Multiple choice cards need at least 2 options.")
            if not correct_answers:
                correct_answers = [options[0]]
                logger.warning(
                    "No correct answer specified for multiple choice, defaulting to first option '%s'",
                    options[0],
                )
            missing = [a for a in correct_answers if a not in options]
            if missing:
                raise ValueError(f"Correct answers not among the options: {missing}")
        else:
            correct_answers = [answer]

        card = Flashcard(
            id=self.next_id(),
            question=question,
            answer=answer,
            correct_answers=correct_answers,
            options=options,
            category=category,
        )
        self._cards[card.id] = card
        logger.info("Added card %d in category '%s'", card.id, card.category)
        self.save()
        return card

    def find_by_id(self, card_id: int) -> Optional[Flashcard]:
        return self._cards.get(card_id)

    def delete(self, card_id: int) -> bool:
        """Remove the card with ``card_id``; ``False`` when there is none."""
        if card_id not in self._cards:
            logger.info("Card %d not found, nothing deleted", card_id)
            return False
        del self._cards[card_id]
        logger.info("Deleted card %d", card_id)
        self.save()
        return True

    def categories(self) -> list[str]:
        return sorted({card.category for card in self._cards.values()})
