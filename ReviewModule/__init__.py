"""
ReviewModule
------------
Runs self-assessed review passes over a deck or one of its categories.
"""

from .review_session import run_review

__all__ = ["run_review"]
