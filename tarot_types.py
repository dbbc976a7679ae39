"""Shared dataclasses describing card positions, layouts and drawn cards."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Union


class Suit(str, Enum):
    """The four minor suits plus the major arcana group."""

    RODS = "rods"
    COINS = "coins"
    CUPS = "cups"
    BLADES = "blades"
    MAJOR_ARCANA = "majorArcana"

    @property
    def is_major(self) -> bool:
        return self is Suit.MAJOR_ARCANA


MINOR_SUITS = (Suit.RODS, Suit.COINS, Suit.CUPS, Suit.BLADES)


@dataclass(frozen=True)
class CardPosition:
    """Where a card identity sits inside the deck: its suit and rank."""

    suit: Suit
    rank: int


@dataclass(frozen=True)
class LayoutTemplate:
    """How many suit icons go in each region of a card face.

    Court cards carry their court label in ``center`` instead of a count.
    """

    top: int
    center: Union[int, str]
    bottom: int

    def to_dict(self) -> Dict[str, Any]:
        return {"top": self.top, "center": self.center, "bottom": self.bottom}


@dataclass(frozen=True)
class CardRecord:
    """A single dealt card, ready for display."""

    title: str
    upright: bool
    symbolism: str
    template: LayoutTemplate
    identity: int
    suit: Suit
    rank: int

    @property
    def orientation(self) -> str:
        return "upright" if self.upright else "reversed"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "upright": self.upright,
            "symbolism": self.symbolism,
            "template": self.template.to_dict(),
            "identity": self.identity,
            "suit": self.suit.value,
            "rank": self.rank,
        }

    def __str__(self) -> str:
        return f"{self.title} ({self.orientation})"


@dataclass(frozen=True)
class DeckConfig:
    """Display names for the minor suits."""

    rods: str = "Rods"
    coins: str = "Coins"
    cups: str = "Cups"
    blades: str = "Blades"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DeckConfig":
        """Build a config from a partial mapping, ignoring unknown keys."""

        known = {field.name for field in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def suit_names(self) -> Dict[Suit, str]:
        return {
            Suit.RODS: self.rods,
            Suit.COINS: self.coins,
            Suit.CUPS: self.cups,
            Suit.BLADES: self.blades,
        }

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


__all__ = [
    "CardPosition",
    "CardRecord",
    "DeckConfig",
    "LayoutTemplate",
    "MINOR_SUITS",
    "Suit",
]
