from __future__ import annotations

from typing import Protocol

from part_dedupe.models import Item, Pair, Resolution, ValueAddedOutput


class ValueAddedGenerator(Protocol):
    """Derive operator guidance from a resolved pair."""

    def generate(self, pair: Pair | None, item_a: Item | None, item_b: Item | None) -> list[ValueAddedOutput]:
        ...


class ResolutionPipeline(Protocol):
    """End-to-end lookup, selection and enrichment for one category/pair choice."""

    def resolve(self, category: str, pair_id: str | None = None, swapped: bool = False) -> Resolution | None:
        ...
