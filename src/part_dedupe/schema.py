from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from part_dedupe.errors import ValidationError
from part_dedupe.models import Item, Lifecycle, Pair


class Category(StrEnum):
    BEARING = "Bearing"
    SCREW = "Screw"
    VALVE = "Valve"
    GASKET = "Gasket"
    SEAL = "Seal"
    PIPE = "Pipe"
    FLANGE = "Flange"
    MOTOR = "Motor"
    PUMP = "Pump"
    SENSOR = "Sensor"
    CABLE = "Cable"
    FASTENER = "Fastener"
    OTHER = "Other"


def parse_category(value: object) -> Category:
    try:
        return Category(str(value))
    except ValueError as exc:
        raise ValidationError(f"Unknown category: {value!r}") from exc


def item_from_mapping(raw: Mapping[str, Any]) -> Item:
    """Build an item from the camelCase dataset shape.

    ``lifecycle.criticalityScore`` is optional; a value outside 0..5 is rejected.
    """
    raw = _require_mapping(raw, "Item")
    item_id = raw.get("id")
    if not item_id:
        raise ValidationError("Item is missing an id")

    lifecycle = None
    raw_lifecycle = raw.get("lifecycle")
    if raw_lifecycle is not None:
        criticality = _require_mapping(raw_lifecycle, f"Item {item_id} lifecycle").get("criticalityScore")
        if criticality is not None:
            if isinstance(criticality, bool) or not isinstance(criticality, int) or not 0 <= criticality <= 5:
                raise ValidationError(
                    f"Item {item_id} has criticalityScore {criticality!r} outside 0..5",
                    item_id=str(item_id),
                )
        lifecycle = Lifecycle(criticality_score=criticality)

    category = raw.get("category")
    return Item(
        id=str(item_id),
        display_name=str(raw.get("displayName") or item_id),
        manufacturer=raw.get("manufacturer"),
        standard=raw.get("standard"),
        key_specs=MappingProxyType(dict(_require_mapping(raw.get("keySpecs") or {}, f"Item {item_id} keySpecs"))),
        lifecycle=lifecycle,
        category=parse_category(category) if category else None,
    )


def pair_from_mapping(raw: Mapping[str, Any]) -> Pair:
    raw = _require_mapping(raw, "Pair")
    pair_id = raw.get("pairId")
    if not pair_id:
        raise ValidationError("Pair is missing a pairId")

    similarity = raw.get("similarity", 0.0)
    if isinstance(similarity, bool) or not isinstance(similarity, (int, float)) or not 0.0 <= similarity <= 1.0:
        raise ValidationError(f"Pair {pair_id} has similarity {similarity!r} outside 0..1", pair_id=str(pair_id))

    return Pair(
        pair_id=str(pair_id),
        category=parse_category(raw.get("category")),
        a_id=str(raw.get("aId", "")),
        b_id=str(raw.get("bId", "")),
        similarity=float(similarity),
        differences=_text_tuple(raw.get("differences"), f"Pair {pair_id} differences"),
        risk_notes=_text_tuple(raw.get("riskNotes"), f"Pair {pair_id} riskNotes"),
    )


def item_to_mapping(item: Item) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": item.id,
        "displayName": item.display_name,
        "manufacturer": item.manufacturer,
        "standard": item.standard,
        "keySpecs": dict(item.key_specs),
        "lifecycle": {"criticalityScore": item.lifecycle.criticality_score} if item.lifecycle else None,
    }
    if item.category:
        payload["category"] = str(item.category)
    return payload


def pair_to_mapping(pair: Pair) -> dict[str, Any]:
    return {
        "pairId": pair.pair_id,
        "category": str(pair.category),
        "aId": pair.a_id,
        "bId": pair.b_id,
        "similarity": pair.similarity,
        "differences": list(pair.differences),
        "riskNotes": list(pair.risk_notes),
    }


def mapping_records(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    """Return ``payload[key]`` as a list of mappings; a missing key means no records."""
    records = _require_mapping(payload, "Catalog").get(key, ())
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise ValidationError(f"Catalog {key} must be a list, got {type(records).__name__}")
    return [_require_mapping(raw, f"Catalog {key} entry") for raw in records]


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _text_tuple(values: Any, what: str) -> tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ValidationError(f"{what} must be a list of strings, got {type(values).__name__}")
    return tuple(str(value) for value in values)
