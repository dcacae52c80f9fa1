"""
Stable card indices and binary card-set vectors.

Indices follow make_deck_78():
  - 0..55  : base cards (4 suits × 14 ranks, suit-major then Ace..King)
  - 56..76 : trumps 1..21
  - 77     : Fool
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from .deck import Card, Rank, Suit, make_deck_78

NUM_CARDS: int = 78
NUM_RANKS: int = len(Rank)
TRUMP_OFFSET: int = len(Suit) * NUM_RANKS  # 56
FOOL_INDEX: int = NUM_CARDS - 1

_SUIT_INDEX = {s: i for i, s in enumerate(Suit)}
_CARDS_BY_INDEX: tuple[Card, ...] = tuple(make_deck_78())


def card_index(card: Card) -> int:
    figure = card.figure
    if figure.is_base():
        return _SUIT_INDEX[figure.suit] * NUM_RANKS + (figure.rank.value - 1)
    if figure.is_trump():
        return TRUMP_OFFSET + (figure.trump.value - 1)
    return FOOL_INDEX


def card_from_index(index: int) -> Card:
    if not 0 <= index < NUM_CARDS:
        raise ValueError(f"Card index out of range: {index}")
    return _CARDS_BY_INDEX[index]


def encode_card_set(cards: Iterable[Card]) -> np.ndarray:
    """Binary (78,) int8 vector: 1 if the card is present, else 0."""
    vec = np.zeros(NUM_CARDS, dtype=np.int8)
    for c in cards:
        vec[card_index(c)] = 1
    return vec


def decode_card_set(vector: Iterable[int]) -> list[Card]:
    """Cards whose entry is 1, in deck order. Entries must be 0 or 1."""
    arr = np.asarray(vector if isinstance(vector, np.ndarray) else list(vector))
    if arr.shape != (NUM_CARDS,):
        raise ValueError(f"Expected a vector of shape ({NUM_CARDS},), got {arr.shape}")
    if not np.isin(arr, (0, 1)).all():
        raise ValueError("Card-set vector entries must be 0 or 1")
    return [_CARDS_BY_INDEX[i] for i in np.flatnonzero(arr)]
