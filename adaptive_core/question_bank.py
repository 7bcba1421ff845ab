# adaptive_core/question_bank.py

from __future__ import annotations

import json
import logging
import os
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .schema import CognitiveDomain, DifficultyLevel, Item, LEVEL_ORDER

DOMAIN_ORDER = list(CognitiveDomain)

_KNOWN_FIELDS = ("id", "difficulty_level", "subject", "topic", "stem", "points", "cognitive_domain")

logger = logging.getLogger(__name__)


class InMemoryQuestionBank:
    """
    Minimal question bank: keeps items in insertion order and filters them
    by tier, subject and topic. Stands in for the real curriculum store.
    """

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._items: Dict[str, Item] = {}
        for item in items or ():
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: Item) -> str:
        if item.id in self._items:
            raise ValueError(f"Duplicate item id: {item.id}")
        self._items[item.id] = item
        return item.id

    def get(self, item_id: str) -> Optional[Item]:
        return self._items.get(item_id)

    def search(
        self,
        difficulty_level: Optional[DifficultyLevel] = None,
        subject: Optional[str] = None,
        topics: Optional[Sequence[str]] = None,
        exclude_ids: Iterable[str] = (),
    ) -> List[Item]:
        excluded = set(exclude_ids)
        level = DifficultyLevel(difficulty_level) if difficulty_level is not None else None

        out: List[Item] = []
        for item in self._items.values():
            if item.id in excluded:
                continue
            if level is not None and item.difficulty_level != level:
                continue
            if subject and item.subject != subject:
                continue
            if topics and item.topic not in topics:
                continue
            out.append(item)
        return out


def _item_from_record(record: Dict) -> Item:
    item_id = str(record["id"])
    raw_level = str(record.get("difficulty_level", "")).strip().lower()
    try:
        level = DifficultyLevel(raw_level)
    except ValueError:
        raise ValueError(f"Item {item_id}: unknown difficulty level {raw_level!r}") from None

    raw_domain = record.get("cognitive_domain")
    try:
        domain = CognitiveDomain(str(raw_domain).strip().lower()) if raw_domain else None
    except ValueError:
        raise ValueError(f"Item {item_id}: unknown cognitive domain {raw_domain!r}") from None

    extra = {k: v for k, v in record.items() if k not in _KNOWN_FIELDS}
    return Item(
        id=item_id,
        difficulty_level=level,
        subject=record.get("subject"),
        topic=record.get("topic"),
        stem=record.get("stem"),
        points=float(record.get("points", 1.0)),
        cognitive_domain=domain,
        metadata=extra,
    )


def load_question_bank(path: Union[str, os.PathLike]) -> InMemoryQuestionBank:
    """Load a JSON list of item records into a bank."""
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON list of items")

    bank = InMemoryQuestionBank(_item_from_record(r) for r in records)
    logger.info(f"Loaded {len(bank)} items from {path}")
    return bank


def build_synthetic_bank(per_level: int = 4, subject: str = "mathematics") -> InMemoryQuestionBank:
    """Deterministic bank with `per_level` items on every tier."""
    items = [
        Item(
            id=f"{level.value}_{idx}",
            difficulty_level=level,
            subject=subject,
            topic=f"topic_{idx % 2}",
            stem=f"{subject} {level.value} question #{idx}",
            cognitive_domain=DOMAIN_ORDER[idx % len(DOMAIN_ORDER)],
        )
        for level in LEVEL_ORDER
        for idx in range(per_level)
    ]
    return InMemoryQuestionBank(items)
