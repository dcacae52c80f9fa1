"""
Command-line demonstration of the card model.

Usage examples:

    python -m ottar.cli hand --size 18 --seed 7 --style short
    python -m ottar.cli deck --sorted
    python -m ottar.cli compare T1 R♠
"""
from __future__ import annotations

import argparse
import random
from typing import Optional

from .deck import DECK_SIZE, POINTS_SCALE, Deck, cards_point_total, make_deck_78
from .ordering import compare_cards
from .render import STYLES, RenderConfig, parse_card, render_card, render_cards, render_deck, sorted_cards


def _add_style_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--style",
        choices=STYLES,
        default="long",
        help="Card label style.",
    )


def _add_hand_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "hand",
        help="Draw and print a sample hand.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=18,
        help="Number of cards in the hand.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the draw.",
    )
    _add_style_argument(parser)
    parser.set_defaults(func=_cmd_hand)


def _cmd_hand(args: argparse.Namespace) -> None:
    if not 0 <= args.size <= DECK_SIZE:
        raise ValueError(f"Hand size must be between 0 and {DECK_SIZE}, got {args.size}")
    rng = random.Random(args.seed)
    hand = sorted_cards(rng.sample(make_deck_78(), args.size))
    config = RenderConfig(style=args.style)
    print(render_cards(hand, config), flush=True)
    total = cards_point_total(hand)
    print(f"points={total / POINTS_SCALE:.1f} (scaled {total})", flush=True)


def _add_deck_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "deck",
        help="Print the full 78-card deck and its point total.",
    )
    parser.add_argument(
        "--sorted",
        action="store_true",
        help="Print cards in build order instead of set order.",
    )
    _add_style_argument(parser)
    parser.set_defaults(func=_cmd_deck)


def _cmd_deck(args: argparse.Namespace) -> None:
    deck = Deck.build()
    config = RenderConfig(style=args.style)
    if args.sorted:
        print(render_cards(sorted_cards(deck), config), flush=True)
    else:
        print(render_deck(deck, config), flush=True)
    total = deck.total_points()
    print(f"cards={len(deck)} points={total / POINTS_SCALE:.1f} (scaled {total})", flush=True)


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "compare",
        help="Compare two cards structurally (first card is the led card).",
    )
    parser.add_argument("first", help='Short label, e.g. "R♠", "RS", "T21" or "Fool".')
    parser.add_argument("second", help="Short label of the second card.")
    parser.set_defaults(func=_cmd_compare)


def _cmd_compare(args: argparse.Namespace) -> None:
    first = parse_card(args.first)
    second = parse_card(args.second)
    result = compare_cards(first, second)
    print(f"{render_card(first)} vs {render_card(second)}: {result.name}", flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ottar", description="Tarot card model demonstration.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_hand_parser(subparsers)
    _add_deck_parser(subparsers)
    _add_compare_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        try:
            args.func(args)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
