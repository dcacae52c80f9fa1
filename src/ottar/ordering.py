"""
Card comparisons.

Suits are compared by trick convention: the left operand is taken to be the
led suit, so any other suit compares GREATER from the left. This relation is
not antisymmetric; callers that know the led suit should prefer
``play.resolve_trick_card``.

Figures are ordered structurally by variant tier, then by payload:

    tier 0: Fool
    tier 1: Base(suit, rank)
    tier 2: Trump(strength)

The Fool's tier is a structural choice, not a gameplay rule.
"""
from __future__ import annotations

from enum import IntEnum

from .deck import Card, Figure, Rank, Suit, Trump


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


FIGURE_TIERS = {"fool": 0, "base": 1, "trump": 2}


def _compare_ints(a: int, b: int) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _check_members(enum_cls: type, a: object, b: object) -> None:
    # Rank and Trump share values; mixing them is a caller bug.
    if not isinstance(a, enum_cls) or not isinstance(b, enum_cls):
        raise TypeError(f"Expected two {enum_cls.__name__} members, got {a!r} and {b!r}")


def compare_suits(a: Suit, b: Suit) -> Ordering:
    """EQUAL for the same suit, GREATER otherwise. Never LESS."""
    if a == b:
        return Ordering.EQUAL
    return Ordering.GREATER


def compare_ranks(a: Rank, b: Rank) -> Ordering:
    _check_members(Rank, a, b)
    return _compare_ints(a.value, b.value)


def compare_trumps(a: Trump, b: Trump) -> Ordering:
    _check_members(Trump, a, b)
    return _compare_ints(a.value, b.value)


def figure_tier(figure: Figure) -> int:
    return FIGURE_TIERS[figure.kind]


def compare_figures(a: Figure, b: Figure) -> Ordering:
    """
    Compare two figures, left operand being the led card:
    1. different variants: by tier (any Trump beats any Base, Fool sorts first)
    2. Trump vs Trump: by strength
    3. Base vs Base: by suit (led-suit convention), then by rank
    """
    tier_a, tier_b = figure_tier(a), figure_tier(b)
    if tier_a != tier_b:
        return _compare_ints(tier_a, tier_b)
    if a.is_trump():
        return compare_trumps(a.trump, b.trump)
    if a.is_base():
        by_suit = compare_suits(a.suit, b.suit)
        if by_suit != Ordering.EQUAL:
            return by_suit
        return compare_ranks(a.rank, b.rank)
    return Ordering.EQUAL


def compare_cards(a: Card, b: Card) -> Ordering:
    return compare_figures(a.figure, b.figure)
