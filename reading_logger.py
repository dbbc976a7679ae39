"""Structured logging helpers for tarot readings."""

from __future__ import annotations

import csv
import json
from typing import Optional, Sequence

from tarot_types import CardRecord


class ReadingLogger:
    def __init__(self, path: str, *, fmt: str = "jsonl") -> None:
        self.format = fmt.lower()
        if self.format not in {"jsonl", "csv"}:
            raise ValueError(f"Unsupported log format: {fmt}")
        self.path = path
        newline = "" if self.format == "csv" else "\n"
        self._handle = open(path, "w", encoding="utf-8", newline=newline)
        self._writer: Optional[csv.DictWriter] = None
        if self.format == "csv":
            fieldnames = ["reading_id", "remaining", "titles", "cards"]
            self._writer = csv.DictWriter(self._handle, fieldnames=fieldnames)
            self._writer.writeheader()

    def __enter__(self) -> "ReadingLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, reading_id: int, cards: Sequence[CardRecord], remaining: int) -> None:
        payload = [card.to_dict() for card in cards]
        if self.format == "jsonl":
            record = {"reading_id": reading_id, "remaining": remaining, "cards": payload}
            json.dump(record, self._handle, ensure_ascii=False)
            self._handle.write("\n")
        else:
            assert self._writer is not None
            self._writer.writerow(
                {
                    "reading_id": reading_id,
                    "remaining": remaining,
                    "titles": "; ".join(str(card) for card in cards) or "none",
                    "cards": json.dumps(payload, ensure_ascii=False),
                }
            )
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()


__all__ = ["ReadingLogger"]
