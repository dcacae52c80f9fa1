"""
Text forms of figures, cards and decks.

Two styles:
- long:  "Ace of Spades", "Twenty-One of Trumps", "Fool"
- short: "A♠", "C♥" (Knight = Cavalier), "T21", "Fool"

Both are lossless; ``parse_card`` reads the short form back.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .deck import (
    FOOL_CARD,
    Card,
    Deck,
    Figure,
    Rank,
    Suit,
    Trump,
    make_base_card,
    make_deck_78,
    make_trump_card,
)

STYLES = ("long", "short")

_SUIT_GLYPHS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}
# Court letters follow the French deck: Valet, Cavalier, Dame, Roi.
_RANK_LETTERS = {
    Rank.ACE: "A",
    Rank.JACK: "V",
    Rank.KNIGHT: "C",
    Rank.QUEEN: "D",
    Rank.KING: "R",
}
_FOOL_LABEL = "Fool"


@dataclass(frozen=True)
class RenderConfig:
    style: str = "long"
    separator: str = " "

    def __post_init__(self) -> None:
        if self.style not in STYLES:
            raise ValueError(f"Unknown render style: {self.style!r} (expected one of {STYLES})")


DEFAULT_CONFIG = RenderConfig()


def _title(name: str) -> str:
    return name.replace("_", "-").title()


def _long(figure: Figure) -> str:
    if figure.is_fool():
        return _FOOL_LABEL
    if figure.is_trump():
        return f"{_title(figure.trump.name)} of Trumps"
    return f"{_title(figure.rank.name)} of {_title(figure.suit.name)}s"


def _short(figure: Figure) -> str:
    if figure.is_fool():
        return _FOOL_LABEL
    if figure.is_trump():
        return f"T{figure.trump.value}"
    rank_str = _RANK_LETTERS.get(figure.rank) or str(figure.rank.value)
    return f"{rank_str}{_SUIT_GLYPHS[figure.suit]}"


def render_figure(figure: Figure, config: RenderConfig = DEFAULT_CONFIG) -> str:
    if config.style == "short":
        return _short(figure)
    return _long(figure)


def render_card(card: Card, config: RenderConfig = DEFAULT_CONFIG) -> str:
    return render_figure(card.figure, config)


def render_cards(cards: Iterable[Card], config: RenderConfig = DEFAULT_CONFIG) -> str:
    return config.separator.join(render_card(c, config) for c in cards)


def render_deck(deck: Deck, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Space-joined card texts in the deck's own (unstable) iteration order."""
    return render_cards(deck, config)


_DECK_ORDER = {card: i for i, card in enumerate(make_deck_78())}


def sorted_cards(cards: Iterable[Card]) -> list[Card]:
    """Cards in deck-build order: suits, then trumps 1..21, then the Fool."""
    return sorted(cards, key=_DECK_ORDER.__getitem__)


_SHORT_LABELS = {_short(card.figure): card for card in _DECK_ORDER}


def parse_card(text: str) -> Card:
    """
    Read a short-form label back into a card.
    Accepts ASCII suit letters (S, H, D, C) in place of the glyphs.
    """
    label = text.strip()
    if label.lower() == _FOOL_LABEL.lower():
        return FOOL_CARD
    if label[:1] in ("T", "t") and label[1:].isdigit():
        number = int(label[1:])
        if 1 <= number <= 21:
            return make_trump_card(Trump(number))
        raise ValueError(f"Trump out of range: {text!r}")
    ascii_suits = {"S": Suit.SPADE, "H": Suit.HEART, "D": Suit.DIAMOND, "C": Suit.CLUB}
    if len(label) >= 2 and label[-1].upper() in ascii_suits:
        rank_part = label[:-1].upper()
        suit = ascii_suits[label[-1].upper()]
        for rank, letter in _RANK_LETTERS.items():
            if rank_part == letter:
                return make_base_card(suit, rank)
        if rank_part.isdigit() and 2 <= int(rank_part) <= 10:
            return make_base_card(suit, Rank(int(rank_part)))
        raise ValueError(f"Unknown rank in card label: {text!r}")
    card = _SHORT_LABELS.get(label[:-1].upper() + label[-1:])
    if card is None:
        raise ValueError(f"Unknown card label: {text!r}")
    return card
