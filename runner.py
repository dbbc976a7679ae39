"""Command-line interface for dealing tarot readings."""

from __future__ import annotations

import argparse
import importlib.util
import json
from typing import Any, Dict, List, Optional

from reading_logger import ReadingLogger
from tarot_deck import DECK_SIZE, TarotDeck
from tarot_errors import DeckExhaustedError
from tarot_types import CardRecord, DeckConfig


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        if path.endswith((".yaml", ".yml")):
            spec = importlib.util.find_spec("yaml")
            if spec is None:
                raise RuntimeError("PyYAML is required to load YAML configurations")
            module = importlib.util.module_from_spec(spec)
            if spec.loader is None:  # pragma: no cover - defensive
                raise RuntimeError("Unable to import yaml module")
            spec.loader.exec_module(module)  # type: ignore[no-untyped-call]
            return module.safe_load(handle) or {}  # type: ignore[attr-defined]
        return json.load(handle)


class ReadingStats:
    def __init__(self) -> None:
        self.readings = 0
        self.cards_drawn = 0
        self.upright = 0
        self.resets = 0

    def update(self, cards: List[CardRecord]) -> None:
        self.readings += 1
        self.cards_drawn += len(cards)
        self.upright += sum(1 for card in cards if card.upright)

    def summary(self, deck: TarotDeck) -> Dict[str, Any]:
        drawn = max(self.cards_drawn, 1)
        return {
            "readings": self.readings,
            "cards_drawn": self.cards_drawn,
            "upright": self.upright,
            "reversed": self.cards_drawn - self.upright,
            "upright_ratio": self.upright / drawn,
            "resets": self.resets,
            "remaining": deck.remaining(),
            "suit_names": deck.config.to_dict(),
        }


def run_readings(
    deck: TarotDeck,
    *,
    readings: int,
    cards: int,
    reset_between: bool = False,
    logger: Optional[ReadingLogger] = None,
) -> ReadingStats:
    """Deal ``readings`` readings of ``cards`` cards each from ``deck``.

    The deck is reset before a reading it cannot satisfy.
    """

    if readings < 0:
        raise ValueError("readings must be non-negative")
    if not 0 <= cards <= DECK_SIZE:
        raise ValueError(f"cards must be between 0 and {DECK_SIZE}")
    stats = ReadingStats()
    for reading_id in range(1, readings + 1):
        if reset_between and reading_id > 1:
            deck.reset_deck()
            stats.resets += 1
        try:
            hand = deck.pull_cards(cards)
        except DeckExhaustedError:
            deck.reset_deck()
            stats.resets += 1
            hand = deck.pull_cards(cards)
        if logger:
            logger.log(reading_id, hand, deck.remaining())
        stats.update(hand)
        print(f"Reading {reading_id}:")
        for card in hand:
            print(f"  - {card}: {card.symbolism}")
    return stats


def build_parser() -> argparse.ArgumentParser:
    defaults = DeckConfig()
    parser = argparse.ArgumentParser(description="Deal tarot readings from a 78-card deck")
    parser.add_argument("--cards", type=int, default=3, help="Cards per reading")
    parser.add_argument("--readings", type=int, default=1, help="Number of readings to deal")
    parser.add_argument(
        "--reset-between",
        action="store_true",
        help="Return all cards to the deck before each reading",
    )
    parser.add_argument("--rods", type=str, default=defaults.rods, help="Display name of the rods suit")
    parser.add_argument("--coins", type=str, default=defaults.coins, help="Display name of the coins suit")
    parser.add_argument("--cups", type=str, default=defaults.cups, help="Display name of the cups suit")
    parser.add_argument("--blades", type=str, default=defaults.blades, help="Display name of the blades suit")
    parser.add_argument("--log", type=str, default=None, help="Path to write per-reading logs")
    parser.add_argument(
        "--log-format", choices=["jsonl", "csv"], default="jsonl", help="Log format"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON or YAML configuration file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    parser = build_parser()
    defaults = parser.parse_args([])
    args = parser.parse_args(argv)
    if args.config:
        config = _load_config(args.config)
        for key, value in config.items():
            key = key.replace("-", "_")
            if hasattr(args, key) and getattr(args, key) == getattr(defaults, key):
                setattr(args, key, value)

    deck_config = DeckConfig.from_mapping(vars(args))
    deck = TarotDeck.from_config(deck_config)
    logger: Optional[ReadingLogger] = None
    if args.log:
        logger = ReadingLogger(args.log, fmt=args.log_format)

    try:
        stats = run_readings(
            deck,
            readings=args.readings,
            cards=args.cards,
            reset_between=args.reset_between,
            logger=logger,
        )
    finally:
        if logger:
            logger.close()

    summary = stats.summary(deck)
    print("=" * 60)
    print(
        f"Readings: {summary['readings']} | Cards: {summary['cards_drawn']} | "
        f"Upright: {summary['upright']} ({summary['upright_ratio']:.1%}) | Resets: {summary['resets']}"
    )
    print("=" * 60 + "\n")
    print(json.dumps(summary, indent=2, ensure_ascii=False))
    return summary


if __name__ == "__main__":
    main()
