"""JSON-file persistence for field cards."""

from __future__ import annotations

import json
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast
from _collections_abc import Mapping

from loguru import logger

from .field_card import FieldCard
from .results import results_dataframe
from .store_path import resolve_store_path

if TYPE_CHECKING:
    import pandas as pd

SIZING_INPUTS: frozenset[str] = frozenset({"measurement", "transport", "climate"})


class FieldCardStore:
    """
    Stores field cards as a JSON array in a single file.

    The store is an ordinary object bound to one path; callers that want a
    shared store pass the same instance (or path) around explicitly.

    Attributes:
        path: Location of the JSON document.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = Path(path) if path is not None else resolve_store_path()

    def describe(self) -> str:
        return f"FieldCardStore(path={self.path})"

    def __repr__(self) -> str:
        return self.describe()

    def all(self) -> list[FieldCard]:
        """Return every stored card in insertion order."""
        return [FieldCard.from_dict(entry) for entry in self._read()]

    def get(self, card_id: str) -> FieldCard | None:
        for entry in self._read():
            if entry.get("id") == card_id:
                return FieldCard.from_dict(entry)
        return None

    def save(self, card: FieldCard) -> str:
        """
        Store a card and return its id.

        A card without an id is appended under a new `card_<ms>` id. A card
        whose id is already stored replaces that entry and keeps its original
        `created_at`. The caller's instance receives the id and timestamps.
        """
        entries: list[dict[str, Any]] = self._read()
        now: str = _timestamp()
        card_id: str = card.id or self._new_id(entries)
        index: int | None = _find(entries, card_id)
        created_at: str = card.created_at or now
        if index is not None:
            created_at = cast(str | None, entries[index].get("created_at")) or created_at
        stored: FieldCard = replace(card, id=card_id, created_at=created_at, updated_at=now)
        if index is None:
            entries.append(stored.to_dict())
        else:
            entries[index] = stored.to_dict()
        self._write(entries)
        card.id, card.created_at, card.updated_at = stored.id, stored.created_at, stored.updated_at
        logger.info(
            "{action} field card {card_id} ({stream}) in {path}",
            action="Saved" if index is None else "Replaced",
            card_id=card_id,
            stream=card.stream_id,
            path=self.path,
        )
        return card_id

    def update(self, card_id: str, **changes: Any) -> bool:
        """
        Merge `changes` into a stored card. Returns False if the id is unknown.

        Changing the measurement, transport or climate inputs of a sized card
        recalculates its result; an unsized card has its result left empty.

        Raises:
            InvalidInput: If the changed inputs cannot be sized. The store is
                left untouched in that case.
        """
        entries: list[dict[str, Any]] = self._read()
        index: int | None = _find(entries, card_id)
        if index is None:
            logger.debug("Field card {card_id} not found for update", card_id=card_id)
            return False
        current: FieldCard = FieldCard.from_dict(entries[index])
        updated: FieldCard = replace(current, **changes)
        updated.id = card_id
        updated.created_at = current.created_at
        updated.updated_at = _timestamp()
        if current.result is not None and "result" not in changes and SIZING_INPUTS.intersection(changes):
            updated.calculate()
        entries[index] = updated.to_dict()
        self._write(entries)
        logger.info("Updated field card {card_id}", card_id=card_id)
        return True

    def delete(self, card_id: str) -> bool:
        entries: list[dict[str, Any]] = self._read()
        remaining: list[dict[str, Any]] = [entry for entry in entries if entry.get("id") != card_id]
        if len(remaining) == len(entries):
            return False
        self._write(remaining)
        logger.info("Deleted field card {card_id}", card_id=card_id)
        return True

    def clear(self) -> None:
        self._write([])

    def dataframe(self) -> "pd.DataFrame":
        """Tabulate stored cards with `results_dataframe`."""
        return results_dataframe(self.all())

    def _new_id(self, entries: list[dict[str, Any]]) -> str:
        existing: set[Any] = {entry.get("id") for entry in entries}
        stamp: int = int(datetime.now(timezone.utc).timestamp() * 1000)
        card_id: str = f"card_{stamp}"
        while card_id in existing:
            stamp += 1
            card_id = f"card_{stamp}"
        return card_id

    def _read(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        text: str = self.path.read_text(encoding="utf-8").strip()
        if not text:
            return []
        try:
            raw: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Field card store {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise ValueError(f"Field card store {self.path} must contain a JSON array.")
        entries: list[dict[str, Any]] = []
        for item in cast(list[Any], raw):
            if not isinstance(item, Mapping):
                raise ValueError(f"Field card store {self.path} contains a non-object entry.")
            entries.append(dict(cast(Mapping[str, Any], item)))
        return entries

    def _write(self, entries: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _find(entries: list[dict[str, Any]], card_id: str) -> int | None:
    return next((index for index, entry in enumerate(entries) if entry.get("id") == card_id), None)
