"""
Pytest configuration and shared fixtures.
"""

from types import MappingProxyType
from typing import Any

import pytest

from part_dedupe.catalog import Catalog
from part_dedupe.models import Item, Lifecycle


def make_item(
    item_id: str,
    manufacturer: str | None = None,
    standard: str | None = None,
    specs: dict[str, Any] | None = None,
    criticality: int | None = None,
    category: str | None = None,
) -> Item:
    return Item(
        id=item_id,
        display_name=f"Part {item_id}",
        manufacturer=manufacturer,
        standard=standard,
        key_specs=MappingProxyType(dict(specs or {})),
        lifecycle=Lifecycle(criticality_score=criticality) if criticality is not None else None,
        category=category,
    )


@pytest.fixture
def raw_catalog() -> dict[str, Any]:
    """Small catalog in the camelCase dataset shape."""
    return {
        "items": [
            {
                "id": "SCR-1",
                "displayName": "Cap Screw M8x25",
                "manufacturer": "Würth",
                "standard": "ISO 4762",
                "keySpecs": {"thread": "M8", "length": "25 mm", "material": "8.8 steel"},
                "lifecycle": {"criticalityScore": 3},
                "category": "Screw",
            },
            {
                "id": "SCR-2",
                "displayName": "CAP SCREW M8X25",
                "manufacturer": None,
                "standard": "DIN 912",
                "keySpecs": {"thread": "M8", "length": "", "material": "8.8 Steel"},
                "lifecycle": {"criticalityScore": 4},
                "category": "Screw",
            },
            {
                "id": "SCR-3",
                "displayName": "Cap Screw M10",
                "manufacturer": "Bossard",
                "standard": "DIN 912",
                "keySpecs": {"thread": "M10"},
                "lifecycle": {"criticalityScore": 1},
                "category": "Screw",
            },
            {
                "id": "SCR-4",
                "displayName": "Cap Screw M10 (old)",
                "manufacturer": "Bossard",
                "standard": "iso 4762",
                "keySpecs": {"thread": "M10"},
                "lifecycle": {"criticalityScore": 1},
                "category": "Screw",
            },
            {
                "id": "VAL-1",
                "displayName": "Ball Valve DN50",
                "manufacturer": "Emerson",
                "standard": "API 608",
                "keySpecs": {"size": "DN50"},
                "lifecycle": {"criticalityScore": 5},
                "category": "Valve",
            },
            {
                "id": "VAL-2",
                "displayName": "BALL VALVE DN50 PN40",
                "manufacturer": None,
                "standard": None,
                "keySpecs": {"size": "DN50", "pressure": "PN40"},
                "lifecycle": {"criticalityScore": 5},
                "category": "Valve",
            },
        ],
        "pairs": [
            {
                "pairId": "P-SCR-001",
                "category": "Screw",
                "aId": "SCR-1",
                "bId": "SCR-2",
                "similarity": 0.91,
                "differences": ["Manufacturer: Würth vs missing", "Standard: ISO 4762 vs DIN 912"],
                "riskNotes": ["Property class mismatch weakens bolted joints"],
            },
            {
                "pairId": "P-VAL-001",
                "category": "Valve",
                "aId": "VAL-1",
                "bId": "VAL-2",
                "similarity": 0.84,
                "differences": ["pressure: missing vs PN40"],
                "riskNotes": ["Pressure rating mismatch is a safety hazard", "Open purchase orders reference both"],
            },
            {
                "pairId": "P-SCR-002",
                "category": "Screw",
                "aId": "SCR-3",
                "bId": "SCR-4",
                "similarity": 0.875,
                "differences": [],
                "riskNotes": [],
            },
        ],
    }


@pytest.fixture
def catalog(raw_catalog) -> Catalog:
    """Parsed catalog built from raw_catalog."""
    return Catalog.from_mapping(raw_catalog)
