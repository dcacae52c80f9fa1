"""Tarot card model: suits, ranks, trumps, the Fool, comparisons and the 78-card deck."""

__version__ = "0.1.0"

from .deck import (
    Card,
    Deck,
    Figure,
    Rank,
    Suit,
    Trump,
    FOOL,
    FOOL_CARD,
    DECK_SIZE,
    DECK_TOTAL_POINTS,
    POINTS_SCALE,
    make_base_card,
    make_base_figure,
    make_trump_card,
    make_trump_figure,
    make_deck_78,
    points,
    true_points,
    cards_point_total,
    total_points,
)
from .ordering import (
    Ordering,
    compare_suits,
    compare_ranks,
    compare_trumps,
    compare_figures,
    compare_cards,
    figure_tier,
)
from .play import TrickOutcome, resolve_trick_card, winning_card, led_suit_of
from .render import RenderConfig, render_card, render_cards, render_deck, sorted_cards, parse_card
from .encoding import NUM_CARDS, card_index, card_from_index, encode_card_set, decode_card_set
