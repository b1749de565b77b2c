"""Duplicate resolution for master-data part records."""

from part_dedupe.catalog import Catalog, find_item, find_pair, find_pairs_by_category, resolve_pair_items
from part_dedupe.errors import ValidationError
from part_dedupe.models import Item, Lifecycle, Pair, Resolution, ValueAddedOutput
from part_dedupe.schema import Category
from part_dedupe.steps import completeness_score, generate_value_added, select_master

__all__ = [
    "Catalog",
    "Category",
    "Item",
    "Lifecycle",
    "Pair",
    "Resolution",
    "ValidationError",
    "ValueAddedOutput",
    "completeness_score",
    "find_item",
    "find_pair",
    "find_pairs_by_category",
    "generate_value_added",
    "resolve_pair_items",
    "select_master",
]
