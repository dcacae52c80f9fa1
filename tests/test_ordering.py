"""Tests for suit, rank, trump and figure comparisons."""
import itertools

import pytest

from ottar.deck import (
    FOOL,
    FOOL_CARD,
    Rank,
    Suit,
    Trump,
    make_base_card,
    make_base_figure,
    make_trump_card,
    make_trump_figure,
)
from ottar.ordering import (
    FIGURE_TIERS,
    Ordering,
    compare_cards,
    compare_figures,
    compare_ranks,
    compare_suits,
    compare_trumps,
    figure_tier,
)


def test_suit_compare_is_equal_only_for_same_suit():
    for a in Suit:
        assert compare_suits(a, a) == Ordering.EQUAL


def test_suit_compare_is_not_antisymmetric():
    # The left operand is the led suit: it wins against any other suit, both ways round.
    for a, b in itertools.permutations(Suit, 2):
        assert compare_suits(a, b) == Ordering.GREATER
        assert compare_suits(b, a) == Ordering.GREATER


def test_suit_compare_never_less():
    for a, b in itertools.product(Suit, repeat=2):
        assert compare_suits(a, b) != Ordering.LESS


def _check_strict_total_order(values, compare):
    for a, b in itertools.product(values, repeat=2):
        ab = compare(a, b)
        assert ab == Ordering(-compare(b, a))
        assert (ab == Ordering.EQUAL) == (a == b)
    for a, b, c in itertools.product(values, repeat=3):
        if compare(a, b) == Ordering.LESS and compare(b, c) == Ordering.LESS:
            assert compare(a, c) == Ordering.LESS


def test_rank_is_strict_total_order():
    _check_strict_total_order(list(Rank), compare_ranks)
    assert compare_ranks(Rank.ACE, Rank.KING) == Ordering.LESS
    assert compare_ranks(Rank.KNIGHT, Rank.JACK) == Ordering.GREATER
    assert compare_ranks(Rank.QUEEN, Rank.KNIGHT) == Ordering.GREATER


def test_trump_is_strict_total_order():
    _check_strict_total_order(list(Trump), compare_trumps)
    assert compare_trumps(Trump.TWENTY_ONE, Trump.ONE) == Ordering.GREATER


def test_tier_table():
    assert FIGURE_TIERS == {"fool": 0, "base": 1, "trump": 2}
    assert figure_tier(FOOL) < figure_tier(make_base_figure(Suit.CLUB, Rank.KING))
    assert figure_tier(make_base_figure(Suit.CLUB, Rank.KING)) < figure_tier(make_trump_figure(Trump.ONE))


def test_any_trump_beats_any_base():
    for t in Trump:
        trump = make_trump_figure(t)
        for s in Suit:
            for r in Rank:
                base = make_base_figure(s, r)
                assert compare_figures(trump, base) == Ordering.GREATER
                assert compare_figures(base, trump) == Ordering.LESS


def test_trump_vs_trump_by_strength():
    assert compare_figures(make_trump_figure(Trump.TWENTY_ONE), make_trump_figure(Trump.ONE)) == Ordering.GREATER
    assert compare_figures(make_trump_figure(Trump.TWO), make_trump_figure(Trump.TEN)) == Ordering.LESS
    assert compare_figures(make_trump_figure(Trump.SIX), make_trump_figure(Trump.SIX)) == Ordering.EQUAL


def test_base_same_suit_by_rank():
    two = make_base_figure(Suit.SPADE, Rank.TWO)
    ace = make_base_figure(Suit.SPADE, Rank.ACE)
    assert compare_figures(two, ace) == Ordering.GREATER
    assert compare_figures(ace, two) == Ordering.LESS


def test_base_cross_suit_left_operand_wins():
    # Ace of the led suit beats a King of another suit.
    led_ace = make_base_figure(Suit.SPADE, Rank.ACE)
    other_king = make_base_figure(Suit.DIAMOND, Rank.KING)
    assert compare_figures(led_ace, other_king) == Ordering.GREATER
    assert compare_figures(other_king, led_ace) == Ordering.GREATER


def test_fool_structural_order_not_gameplay():
    # Structural order only: the Fool sorts before every other figure.
    for card in [make_base_card(Suit.HEART, Rank.ACE), make_trump_card(Trump.ONE)]:
        assert compare_cards(FOOL_CARD, card) == Ordering.LESS
        assert compare_cards(card, FOOL_CARD) == Ordering.GREATER
    assert compare_cards(FOOL_CARD, FOOL_CARD) == Ordering.EQUAL


def test_card_comparison_scenarios():
    a = make_base_card(Suit.SPADE, Rank.ACE)
    b = make_base_card(Suit.SPADE, Rank.TWO)
    c = make_base_card(Suit.DIAMOND, Rank.ACE)
    d = make_trump_card(Trump.ONE)
    e = make_trump_card(Trump.TWENTY_ONE)
    assert compare_cards(b, a) == Ordering.GREATER
    assert compare_cards(a, c) == Ordering.GREATER
    assert compare_cards(d, a) == Ordering.GREATER
    assert compare_cards(e, d) == Ordering.GREATER
    assert compare_cards(FOOL_CARD, a) == Ordering.LESS
    assert compare_cards(d, make_base_card(Suit.SPADE, Rank.KING)) == Ordering.GREATER


def test_rank_and_trump_are_distinct_types():
    assert Rank.TWO != Trump.TWO
    assert len({Rank.TWO, Trump.TWO}) == 2


def test_mixed_rank_and_trump_comparison_rejected():
    with pytest.raises(TypeError):
        compare_ranks(Rank.TWO, Trump.TWO)
    with pytest.raises(TypeError):
        compare_trumps(Trump.ONE, Rank.ACE)
