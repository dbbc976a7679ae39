"""Utilities for working with a standard 78-card tarot deck."""

from __future__ import annotations

import logging
import random
from typing import List, Mapping, Optional

from card_tables import (
    DEFAULT_SUIT_NAMES,
    LAYOUT_TEMPLATES,
    MAJOR_ARCANA_TEMPLATE,
    MAJOR_TITLES,
    RANK_WORDS,
    meaning_for,
)
from tarot_errors import DeckExhaustedError, InvalidCardIdentityError
from tarot_types import MINOR_SUITS, CardPosition, CardRecord, DeckConfig, Suit


logger = logging.getLogger(__name__)

DECK_SIZE = 78
SUIT_SIZE = 14
MAJOR_OFFSET = SUIT_SIZE * len(MINOR_SUITS)


def card_position(identity: int) -> CardPosition:
    """Map a card identity in ``[1, 78]`` to its suit and rank."""

    if isinstance(identity, bool) or not isinstance(identity, int):
        raise InvalidCardIdentityError(f"Card identity must be an int, got {identity!r}")
    if not 1 <= identity <= DECK_SIZE:
        raise InvalidCardIdentityError(f"Card identity out of range: {identity}")
    if identity > MAJOR_OFFSET:
        return CardPosition(Suit.MAJOR_ARCANA, identity - MAJOR_OFFSET)
    if identity <= SUIT_SIZE:
        return CardPosition(Suit.RODS, identity)
    # Coins, cups and blades are numbered by ``identity mod 14 + 1``.
    suit = MINOR_SUITS[(identity - 1) // SUIT_SIZE]
    return CardPosition(suit, identity % SUIT_SIZE + 1)


def card_title(position: CardPosition, suit_names: Mapping[Suit, str]) -> str:
    if position.suit.is_major:
        return MAJOR_TITLES[position.rank]
    return f"{RANK_WORDS[position.rank]} of {suit_names[position.suit]}"


def resolve_card(
    identity: int,
    rng,
    suit_names: Optional[Mapping[Suit, str]] = None,
) -> CardRecord:
    """Build a :class:`CardRecord` for ``identity`` with a fresh orientation.

    ``rng`` only needs a ``random()`` method returning a float in ``[0, 1)``.
    """

    position = card_position(identity)
    names = DEFAULT_SUIT_NAMES if suit_names is None else suit_names
    if position.suit.is_major:
        template = MAJOR_ARCANA_TEMPLATE
    else:
        template = LAYOUT_TEMPLATES[position.rank]
    upright = rng.random() < 0.5
    return CardRecord(
        title=card_title(position, names),
        upright=upright,
        symbolism=meaning_for(position.suit, position.rank, upright),
        template=template,
        identity=identity,
        suit=position.suit,
        rank=position.rank,
    )


class TarotDeck:
    """A 78-card tarot deck that deals unique cards until reset."""

    def __init__(
        self,
        rods: str = "Rods",
        coins: str = "Coins",
        cups: str = "Cups",
        blades: str = "Blades",
        *,
        rng=None,
    ) -> None:
        self._config = DeckConfig(rods=rods, coins=coins, cups=cups, blades=blades)
        self._suit_names = self._config.suit_names()
        self._rng = rng or random.Random()
        self._available: List[int] = []
        self._dealt: List[int] = []
        self.reset_deck()

    @classmethod
    def from_config(cls, config: DeckConfig, *, rng=None) -> "TarotDeck":
        return cls(config.rods, config.coins, config.cups, config.blades, rng=rng)

    @property
    def config(self) -> DeckConfig:
        return self._config

    @property
    def is_exhausted(self) -> bool:
        return not self._available

    def reset_deck(self) -> None:
        """Put every dealt card back into the deck."""

        self._available = list(range(1, DECK_SIZE + 1))
        self._dealt = []
        logger.debug("Deck reset: %d cards available", DECK_SIZE)

    def pull_cards(self, count: int) -> List[CardRecord]:
        """Deal ``count`` unique cards chosen uniformly from those remaining.

        Raises :class:`DeckExhaustedError` without touching the deck when
        fewer than ``count`` cards remain.
        """

        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {count!r}")
        if count < 0:
            raise ValueError("count must be non-negative")
        remaining = len(self._available)
        if count > remaining:
            logger.debug("Refusing to pull %d card(s), %d remaining", count, remaining)
            raise DeckExhaustedError(count, remaining)

        pulled: List[int] = []
        while len(pulled) < count:
            index = self._rng.randrange(len(self._available))
            # Swap with the tail so removal is O(1); availability order is irrelevant.
            self._available[index], self._available[-1] = (
                self._available[-1],
                self._available[index],
            )
            identity = self._available.pop()
            self._dealt.append(identity)
            pulled.append(identity)
        return [self.resolve(identity) for identity in pulled]

    def resolve(self, identity: int) -> CardRecord:
        """Resolve ``identity`` with this deck's suit names, without dealing it."""

        return resolve_card(identity, self._rng, self._suit_names)

    def remaining(self) -> int:
        """Return the number of cards left in the deck."""

        return len(self._available)

    def dealt_count(self) -> int:
        return len(self._dealt)

    def dealt_identities(self) -> List[int]:
        """Return the identities dealt since the last reset, in dealing order."""

        return list(self._dealt)

    def __len__(self) -> int:
        return len(self._available)

    def __repr__(self) -> str:
        return f"TarotDeck(remaining={len(self._available)}, dealt={len(self._dealt)})"


__all__ = [
    "DECK_SIZE",
    "TarotDeck",
    "card_position",
    "card_title",
    "resolve_card",
]
