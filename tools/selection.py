from __future__ import annotations

import random
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def select_cards(cards: Iterable, category_filter: str = "") -> list:
    """Return the cards whose category matches ``category_filter``.

    An empty filter selects every card.  Matching ignores case and keeps the
    original order of ``cards``.
    """
    if not category_filter:
        return list(cards)
    wanted = category_filter.lower()
    return [card for card in cards if card.category.lower() == wanted]


def shuffle_cards(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``; the input is left alone."""
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled
