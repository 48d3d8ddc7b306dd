"""Convenience exports for the quiz module."""

from .quiz_operations import (
    run_quiz,
    prepare_quiz_cards,
    is_correct_answer,
)

__all__ = [
    "run_quiz",
    "prepare_quiz_cards",
    "is_correct_answer",
]
