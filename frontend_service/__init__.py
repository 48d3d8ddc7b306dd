from .interface import ConsoleUI
from .menu import FlashcardApp, card_table_rows

__all__ = ["ConsoleUI", "FlashcardApp", "card_table_rows"]
