from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Lifecycle:
    """Lifecycle attributes assigned to a part by the system of record."""

    criticality_score: int | None = None


@dataclass(frozen=True, slots=True)
class Item:
    """Canonical representation of a master-data part record."""

    id: str
    display_name: str
    manufacturer: str | None = None
    standard: str | None = None
    key_specs: Mapping[str, Any] = field(default_factory=dict)
    lifecycle: Lifecycle | None = None
    category: str | None = None


@dataclass(frozen=True, slots=True)
class Pair:
    """Candidate duplicate relationship between two items, annotated upstream."""

    pair_id: str
    category: str
    a_id: str
    b_id: str
    similarity: float
    differences: tuple[str, ...] = ()
    risk_notes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ValueAddedOutput:
    """A derived enrichment card describing merge guidance for a resolved pair."""

    title: str
    summary: str
    bullets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving one pair: both items, the master, and the enrichment."""

    pair: Pair
    item_a: Item
    item_b: Item
    master: Item
    decided_by: str
    outputs: tuple[ValueAddedOutput, ...]
    swapped: bool = False

    @property
    def left(self) -> Item:
        return self.item_b if self.swapped else self.item_a

    @property
    def right(self) -> Item:
        return self.item_a if self.swapped else self.item_b

    @property
    def duplicate(self) -> Item:
        return self.item_b if self.master is self.item_a else self.item_a
