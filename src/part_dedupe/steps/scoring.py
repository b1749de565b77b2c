from __future__ import annotations

from part_dedupe.models import Item

ISO_MARKER = "ISO"


def completeness_score(item: Item | None) -> int:
    """Count populated descriptive fields: manufacturer, standard and each specified key spec."""
    if item is None:
        return 0
    manufacturer = 1 if item.manufacturer else 0
    standard = 1 if item.standard else 0
    specs = sum(1 for value in (item.key_specs or {}).values() if _is_specified(value))
    return manufacturer + standard + specs


def criticality_score(item: Item | None) -> int:
    if item is None or item.lifecycle is None or item.lifecycle.criticality_score is None:
        return 0
    return item.lifecycle.criticality_score


def has_iso_standard(item: Item | None) -> bool:
    if item is None or not item.standard:
        return False
    return ISO_MARKER in item.standard.upper()


def _is_specified(value: object) -> bool:
    return value is not None and value != ""
