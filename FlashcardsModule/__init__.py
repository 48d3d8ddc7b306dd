"""
FlashcardsModule
----------------
This module handles flashcard records and the JSON deck file they live in.
Cards are created, looked up and deleted through ``FlashcardStore``.
"""

from .flashcards import (
    DEFAULT_CATEGORY,
    Flashcard,
    FlashcardError,
    FlashcardLoadError,
    FlashcardSaveError,
    FlashcardStore,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "Flashcard",
    "FlashcardError",
    "FlashcardLoadError",
    "FlashcardSaveError",
    "FlashcardStore",
]
