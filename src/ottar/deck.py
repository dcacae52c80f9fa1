"""
Tarot deck: 78 cards (4 suits × 14, 21 trumps, Fool).
Points are scaled by 10 so every card value is an exact integer (91.0 -> 910).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class Suit(Enum):
    """Pique, Cœur, Carreau, Trèfle. No order between suits, only equality."""
    SPADE = "spade"
    HEART = "heart"
    DIAMOND = "diamond"
    CLUB = "club"


class Rank(Enum):
    """Ace (lowest) .. King. Ordered by value through ordering.compare_ranks."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    KNIGHT = 12
    QUEEN = 13
    KING = 14


class Trump(Enum):
    """Trump strength 1..21. Ordered by value through ordering.compare_trumps."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12
    THIRTEEN = 13
    FOURTEEN = 14
    FIFTEEN = 15
    SIXTEEN = 16
    SEVENTEEN = 17
    EIGHTEEN = 18
    NINETEEN = 19
    TWENTY = 20
    TWENTY_ONE = 21


POINTS_SCALE = 10
DECK_SIZE = 78
DECK_TOTAL_POINTS = 910

# Scaled point values of the honours; any other base card or trump is worth 5.
_RANK_POINTS = {
    Rank.JACK: 15,
    Rank.KNIGHT: 25,
    Rank.QUEEN: 35,
    Rank.KING: 45,
}
_BOUT_POINTS = 45
_LOW_POINTS = 5


@dataclass(frozen=True)
class Figure:
    """
    Identity of a playable card. Either:
    - fool: no suit/rank/trump
    - base: suit + rank
    - trump: strength 1..21
    """

    kind: str  # "fool" | "base" | "trump"
    suit: Optional[Suit] = None
    rank: Optional[Rank] = None
    trump: Optional[Trump] = None

    def __post_init__(self) -> None:
        if self.kind == "base":
            if not isinstance(self.suit, Suit) or not isinstance(self.rank, Rank):
                raise ValueError(f"Base figure needs a Suit and a Rank, got {self.suit!r}, {self.rank!r}")
            if self.trump is not None:
                raise ValueError("Base figure cannot carry a trump")
        elif self.kind == "trump":
            if not isinstance(self.trump, Trump):
                raise ValueError(f"Trump figure needs a Trump, got {self.trump!r}")
            if self.suit is not None or self.rank is not None:
                raise ValueError("Trump figure cannot carry a suit or rank")
        elif self.kind == "fool":
            if self.suit is not None or self.rank is not None or self.trump is not None:
                raise ValueError("Fool carries no suit, rank or trump")
        else:
            raise ValueError(f"Unknown figure kind: {self.kind}")

    def is_fool(self) -> bool:
        return self.kind == "fool"

    def is_base(self) -> bool:
        return self.kind == "base"

    def is_trump(self) -> bool:
        return self.kind == "trump"

    def is_bout(self) -> bool:
        """True if this figure is one of the 3 Bouts (Fool, trump 1, trump 21)."""
        if self.kind == "fool":
            return True
        return self.kind == "trump" and self.trump in (Trump.ONE, Trump.TWENTY_ONE)

    def __str__(self) -> str:
        from .render import render_figure

        return render_figure(self)


FOOL = Figure(kind="fool")


def make_base_figure(suit: Suit, rank: Rank) -> Figure:
    return Figure(kind="base", suit=suit, rank=rank)


def make_trump_figure(trump: Trump) -> Figure:
    return Figure(kind="trump", trump=trump)


@dataclass(frozen=True)
class Card:
    """A card of the deck. Equality and hash only look at the figure."""

    figure: Figure

    @property
    def points(self) -> int:
        return points(self)

    def is_fool(self) -> bool:
        return self.figure.is_fool()

    def is_base(self) -> bool:
        return self.figure.is_base()

    def is_trump(self) -> bool:
        return self.figure.is_trump()

    def is_bout(self) -> bool:
        return self.figure.is_bout()

    def __str__(self) -> str:
        return str(self.figure)


FOOL_CARD = Card(FOOL)


def make_base_card(suit: Suit, rank: Rank) -> Card:
    return Card(make_base_figure(suit, rank))


def make_trump_card(trump: Trump) -> Card:
    return Card(make_trump_figure(trump))


def points(card: Card) -> int:
    """
    Point value scaled by POINTS_SCALE.
    Bouts 45, King 45, Queen 35, Knight 25, Jack 15, any other card 5.
    """
    figure = card.figure
    if figure.is_bout():
        return _BOUT_POINTS
    if figure.is_trump():
        return _LOW_POINTS
    return _RANK_POINTS.get(figure.rank, _LOW_POINTS)


def true_points(card: Card) -> float:
    """Unscaled point value (4.5, 3.5, 2.5, 1.5 or 0.5)."""
    return points(card) / POINTS_SCALE


def cards_point_total(cards: Iterable[Card]) -> int:
    """Total scaled points in a set of cards. 910 for a full deck."""
    return sum(points(c) for c in cards)


def make_deck_78() -> list[Card]:
    """Full 78-card list: suits × ranks (suit-major), trumps 1..21, then the Fool."""
    deck: list[Card] = []
    for s in Suit:
        for rank in Rank:
            deck.append(make_base_card(s, rank))
    for t in Trump:
        deck.append(make_trump_card(t))
    deck.append(FOOL_CARD)
    return deck


class Deck:
    """
    Read-only set of distinct cards.

    Iteration order is the set's and is not stable across runs; use
    ``render.sorted_cards`` when a fixed order matters.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        members: set[Card] = set()
        for card in cards:
            members.add(card)  # duplicates are absorbed
        self._cards = frozenset(members)

    @classmethod
    def build(cls) -> "Deck":
        """Every valid card exactly once (78 cards)."""
        return cls(make_deck_78())

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Deck":
        return cls(cards)

    @property
    def cards(self) -> frozenset[Card]:
        return self._cards

    def total_points(self) -> int:
        return cards_point_total(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def __str__(self) -> str:
        from .render import render_deck

        return render_deck(self)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def total_points(deck: Deck) -> int:
    return deck.total_points()
