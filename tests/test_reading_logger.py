from __future__ import annotations

import csv
import json
import random

import pytest

from reading_logger import ReadingLogger
from tarot_deck import TarotDeck


def test_jsonl_log_writes_one_line_per_reading(tmp_path) -> None:
    deck = TarotDeck(rng=random.Random(3))
    path = tmp_path / "readings.jsonl"
    with ReadingLogger(str(path)) as logger:
        logger.log(1, deck.pull_cards(3), deck.remaining())
        logger.log(2, deck.pull_cards(0), deck.remaining())

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["reading_id"] == 1
    assert first["remaining"] == 75
    assert len(first["cards"]) == 3
    assert first["cards"][0]["template"].keys() == {"top", "center", "bottom"}
    assert json.loads(lines[1])["cards"] == []


def test_csv_log_has_header_and_rows(tmp_path) -> None:
    deck = TarotDeck()
    path = tmp_path / "readings.csv"
    logger = ReadingLogger(str(path), fmt="CSV")
    cards = deck.pull_cards(2)
    logger.log(1, cards, deck.remaining())
    logger.close()
    logger.close()

    with open(path, encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 1
    assert rows[0]["reading_id"] == "1"
    assert rows[0]["remaining"] == "76"
    assert rows[0]["titles"] == "; ".join(str(card) for card in cards)
    assert [card["title"] for card in json.loads(rows[0]["cards"])] == [card.title for card in cards]


def test_unsupported_format_is_rejected(tmp_path) -> None:
    with pytest.raises(ValueError):
        ReadingLogger(str(tmp_path / "readings.xml"), fmt="xml")
