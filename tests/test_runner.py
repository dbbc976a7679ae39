from __future__ import annotations

import json
import random

import pytest

from runner import main, run_readings
from tarot_deck import TarotDeck


def test_run_readings_resets_when_deck_runs_out(capsys) -> None:
    deck = TarotDeck(rng=random.Random(11))
    stats = run_readings(deck, readings=3, cards=30)

    assert stats.readings == 3
    assert stats.cards_drawn == 90
    assert stats.resets == 1
    assert deck.remaining() == 78 - 30
    assert "Reading 3:" in capsys.readouterr().out


def test_run_readings_reset_between() -> None:
    deck = TarotDeck()
    stats = run_readings(deck, readings=4, cards=5, reset_between=True)
    assert stats.resets == 3
    assert deck.remaining() == 73


@pytest.mark.parametrize("cards", [-1, 79])
def test_run_readings_rejects_impossible_reading(cards: int) -> None:
    with pytest.raises(ValueError):
        run_readings(TarotDeck(), readings=1, cards=cards)


def test_main_writes_log_and_summary(tmp_path, capsys) -> None:
    log_path = tmp_path / "readings.jsonl"
    summary = main(["--cards", "4", "--readings", "2", "--rods", "Wands", "--log", str(log_path)])

    assert summary["readings"] == 2
    assert summary["cards_drawn"] == 8
    assert summary["upright"] + summary["reversed"] == 8
    assert summary["remaining"] == 70
    assert summary["suit_names"]["rods"] == "Wands"
    assert len(log_path.read_text(encoding="utf-8").splitlines()) == 2
    assert '"cards_drawn": 8' in capsys.readouterr().out


def test_config_file_overrides_defaults(tmp_path) -> None:
    config_path = tmp_path / "deck.json"
    config_path.write_text(
        json.dumps({"cards": 1, "readings": 5, "cups": "Chalices", "reset-between": True}),
        encoding="utf-8",
    )
    summary = main(["--config", str(config_path), "--readings", "2"])

    assert summary["readings"] == 2
    assert summary["cards_drawn"] == 2
    assert summary["resets"] == 1
    assert summary["suit_names"]["cups"] == "Chalices"
