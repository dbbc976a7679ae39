"""Errors raised by the tarot deck."""

from __future__ import annotations


class TarotDeckError(Exception):
    """Base class for tarot deck errors."""


class DeckExhaustedError(TarotDeckError):
    """Raised when more cards are requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(
            f"Cannot pull {requested} card(s): only {remaining} remaining in the deck"
        )
        self.requested = requested
        self.remaining = remaining


class InvalidCardIdentityError(TarotDeckError):
    """Raised when a card identity falls outside the 1-78 range."""


__all__ = ["DeckExhaustedError", "InvalidCardIdentityError", "TarotDeckError"]
