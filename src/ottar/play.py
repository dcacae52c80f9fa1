"""
Two-card resolution with an explicit led suit.
Trumps beat suits; highest trump wins; else highest of led suit. The Fool never wins.
"""
from __future__ import annotations

from enum import Enum

from .deck import Card, Suit
from .ordering import Ordering, compare_ranks, compare_trumps


class TrickOutcome(Enum):
    FIRST = "first"
    SECOND = "second"


def led_suit_of(card: Card) -> Suit | None:
    """Suit that leading with this card asks for; None for trumps and the Fool."""
    if card.is_base():
        return card.figure.suit
    return None


def _follows(card: Card, led_suit: Suit | None) -> bool:
    return led_suit is not None and card.is_base() and card.figure.suit == led_suit


def _beats(card: Card, other: Card, led_suit: Suit | None) -> bool:
    """True if card takes the trick from other, which is already holding it."""
    if card.is_fool():
        return False
    if other.is_fool():
        return True
    if card.is_trump():
        if not other.is_trump():
            return True
        return compare_trumps(card.figure.trump, other.figure.trump) == Ordering.GREATER
    if other.is_trump():
        return False
    if not _follows(card, led_suit):
        return False
    if not _follows(other, led_suit):
        return True
    return compare_ranks(card.figure.rank, other.figure.rank) == Ordering.GREATER


def resolve_trick_card(led_suit: Suit | None, first: Card, second: Card) -> TrickOutcome:
    """
    Which of two cards holds the trick. ``first`` was played before ``second``
    and keeps the trick unless ``second`` strictly beats it.
    ``led_suit`` is None when a trump or the Fool was led.
    """
    if _beats(second, first, led_suit):
        return TrickOutcome.SECOND
    return TrickOutcome.FIRST


def winning_card(led_suit: Suit | None, first: Card, second: Card) -> Card:
    if resolve_trick_card(led_suit, first, second) is TrickOutcome.SECOND:
        return second
    return first
