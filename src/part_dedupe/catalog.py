"""Read-only lookups over an injected catalog of items and candidate pairs.

A ``Catalog`` is never mutated after construction. Callers that need fresh data
build a new one and swap it in between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, NoReturn

from part_dedupe.errors import ValidationError
from part_dedupe.models import Item, Pair
from part_dedupe.schema import (
    item_from_mapping,
    item_to_mapping,
    mapping_records,
    pair_from_mapping,
    pair_to_mapping,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Immutable items + pairs dataset with an id index."""

    __slots__ = ("_items", "_pairs", "_items_by_id")

    def __init__(self, items: Iterable[Item], pairs: Iterable[Pair]) -> None:
        self._items = tuple(items)
        self._pairs = tuple(pairs)

        by_id: dict[str, Item] = {}
        for item in self._items:
            if item.id in by_id:
                raise ValidationError(f"Duplicate item id: {item.id}", item_id=item.id)
            by_id[item.id] = item
        self._items_by_id = by_id

        seen_pairs: set[str] = set()
        for pair in self._pairs:
            if pair.pair_id in seen_pairs:
                raise ValidationError(f"Duplicate pair id: {pair.pair_id}", pair_id=pair.pair_id)
            seen_pairs.add(pair.pair_id)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Catalog":
        items = [item_from_mapping(raw) for raw in mapping_records(payload, "items")]
        pairs = [pair_from_mapping(raw) for raw in mapping_records(payload, "pairs")]
        return cls(items=items, pairs=pairs)

    def to_mapping(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "items": [item_to_mapping(item) for item in self._items],
            "pairs": [pair_to_mapping(pair) for pair in self._pairs],
        }

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def pairs(self) -> tuple[Pair, ...]:
        return self._pairs

    def __len__(self) -> int:
        return len(self._items)

    def get_item(self, item_id: str) -> Item | None:
        return self._items_by_id.get(item_id)


def find_item(catalog: Catalog, item_id: str | None) -> Item | None:
    if not item_id:
        return None
    return catalog.get_item(item_id)


def find_pairs_by_category(catalog: Catalog, category: str) -> list[Pair]:
    return [pair for pair in catalog.pairs if pair.category == category]


def find_pair(catalog: Catalog, category: str, pair_id: str | None) -> Pair | None:
    if not pair_id:
        return None
    for pair in find_pairs_by_category(catalog, category):
        if pair.pair_id == pair_id:
            return pair
    return None


def resolve_pair_items(catalog: Catalog, pair: Pair) -> tuple[Item, Item]:
    """Return ``(item_a, item_b)`` for a pair, or raise if the pair is inconsistent.

    A pair pointing at itself, at an unknown item, or at an item filed under a
    different category cannot yield a trustworthy master recommendation.
    """
    item_a = find_item(catalog, pair.a_id)
    item_b = find_item(catalog, pair.b_id)
    for item_id, item in ((pair.a_id, item_a), (pair.b_id, item_b)):
        if item is None:
            _fault(f"Pair {pair.pair_id} references unknown item {item_id!r}", pair, item_id)
    validate_pair_items(pair, item_a, item_b)
    return item_a, item_b


def validate_pair_items(pair: Pair, item_a: Item, item_b: Item) -> None:
    """Raise unless ``item_a``/``item_b`` are the two distinct items the pair names, in its category."""
    if pair.a_id == pair.b_id:
        _fault(f"Pair {pair.pair_id} references the same item twice ({pair.a_id})", pair)
    for expected_id, item in ((pair.a_id, item_a), (pair.b_id, item_b)):
        if item.id != expected_id:
            _fault(f"Pair {pair.pair_id} expects item {expected_id!r}, got {item.id!r}", pair, item.id)
        if item.category is not None and item.category != pair.category:
            _fault(
                f"Item {item.id} is filed under {item.category}, not {pair.category} as pair {pair.pair_id} claims",
                pair,
                item.id,
            )


def describe_pair(catalog: Catalog, pair: Pair) -> str:
    item_a = find_item(catalog, pair.a_id)
    item_b = find_item(catalog, pair.b_id)
    name_a = item_a.display_name if item_a else ""
    name_b = item_b.display_name if item_b else ""
    return f"{name_a} ↔ {name_b} ({similarity_percent(pair.similarity)}%)"


def similarity_percent(similarity: float) -> int:
    # Round half up: 0.875 -> 88.
    return int(similarity * 100 + 0.5)


def _fault(message: str, pair: Pair, item_id: str | None = None) -> NoReturn:
    logger.warning(message)
    raise ValidationError(message, pair_id=pair.pair_id, item_id=item_id)
