"""Flask service exposing a REST API for dealing tarot cards."""

from __future__ import annotations

import os
import uuid
from typing import Any, Dict

from flask import Flask, abort, jsonify, request

from tarot_deck import TarotDeck
from tarot_errors import DeckExhaustedError
from tarot_types import DeckConfig


SESSIONS: Dict[str, TarotDeck] = {}
app = Flask(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _serialize_deck(deck: TarotDeck) -> Dict[str, Any]:
    return {
        "remaining": deck.remaining(),
        "dealt": deck.dealt_count(),
        "suit_names": deck.config.to_dict(),
    }


def _get_deck(deck_id: str) -> TarotDeck:
    deck = SESSIONS.get(deck_id)
    if deck is None:
        abort(404, description="Deck not found")
    return deck


def _parse_count(payload: Dict[str, Any]) -> int:
    count = payload.get("count", 1)
    if isinstance(count, bool) or not isinstance(count, (int, str)):
        raise ValueError("count must be an integer")
    count = int(count)
    if count < 0:
        raise ValueError("count must be non-negative")
    return count


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.post("/api/decks")
def create_deck():
    payload = request.get_json(force=True, silent=True) or {}
    suit_names = payload.get("suit_names") or {}
    if not isinstance(suit_names, dict):
        abort(400, description="suit_names must be an object")
    deck = TarotDeck.from_config(DeckConfig.from_mapping(suit_names))
    deck_id = str(uuid.uuid4())
    SESSIONS[deck_id] = deck
    return jsonify({"deck_id": deck_id, "state": _serialize_deck(deck)}), 201


@app.get("/api/decks/<deck_id>")
def get_deck(deck_id: str):
    deck = _get_deck(deck_id)
    return jsonify({"deck_id": deck_id, "state": _serialize_deck(deck)})


@app.post("/api/decks/<deck_id>/draw")
def draw_cards(deck_id: str):
    deck = _get_deck(deck_id)
    payload = request.get_json(force=True, silent=True) or {}
    try:
        count = _parse_count(payload)
    except (TypeError, ValueError) as exc:
        abort(400, description=str(exc))
    try:
        cards = deck.pull_cards(count)
    except DeckExhaustedError as exc:
        abort(409, description=str(exc))
    return jsonify(
        {
            "deck_id": deck_id,
            "cards": [card.to_dict() for card in cards],
            "state": _serialize_deck(deck),
        }
    )


@app.post("/api/decks/<deck_id>/reset")
def reset_deck(deck_id: str):
    deck = _get_deck(deck_id)
    deck.reset_deck()
    return jsonify({"deck_id": deck_id, "state": _serialize_deck(deck)})


if __name__ == "__main__":  # pragma: no cover
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 8000)))
