from __future__ import annotations

import random
from collections.abc import Sequence
from types import MappingProxyType

from part_dedupe.catalog import Catalog
from part_dedupe.datasets.profiles import CATEGORY_PROFILES, CategoryProfile
from part_dedupe.models import Item, Lifecycle, Pair
from part_dedupe.schema import Category


class ReferenceCatalogGenerator:
    """Generate a synthetic catalog of parts with near-duplicate pairs for tests and demos.

    Each pair's differences, similarity and risk notes are precomputed here, the way
    the upstream system of record would supply them.
    """

    def __init__(self, seed: int = 7) -> None:
        self._rng = random.Random(seed)

    def generate(self, categories: Sequence[Category] | None = None, pairs_per_category: int = 3) -> Catalog:
        if pairs_per_category <= 0:
            return Catalog(items=[], pairs=[])

        items: list[Item] = []
        pairs: list[Pair] = []
        for category in list(Category) if categories is None else categories:
            profile = CATEGORY_PROFILES[category]
            prefix = category.name[:3]
            for i in range(pairs_per_category):
                base = self._base_item(category, profile, f"{prefix}-{2 * i + 1:05d}")
                variant = self._perturb(base, profile, f"{prefix}-{2 * i + 2:05d}")
                first, second = (base, variant) if self._rng.random() < 0.5 else (variant, base)
                items.extend([base, variant])
                pairs.append(self._pair(f"P-{prefix}-{i + 1:03d}", category, profile, first, second))
        return Catalog(items=items, pairs=pairs)

    def _base_item(self, category: Category, profile: CategoryProfile, item_id: str) -> Item:
        specs = {name: self._rng.choice(values) for name, values in profile.spec_values.items()}
        headline = " ".join(str(value) for value in list(specs.values())[:2])
        return Item(
            id=item_id,
            display_name=f"{profile.noun} {headline}",
            manufacturer=self._rng.choice(profile.manufacturers),
            standard=self._rng.choice(profile.standards),
            key_specs=MappingProxyType(specs),
            lifecycle=Lifecycle(criticality_score=self._rng.randint(0, 5)),
            category=category,
        )

    def _perturb(self, source: Item, profile: CategoryProfile, item_id: str) -> Item:
        specs = dict(source.key_specs)
        manufacturer = source.manufacturer
        standard = source.standard
        criticality = source.lifecycle.criticality_score if source.lifecycle else None

        mutation = self._rng.choice(["sparse", "standard", "spec", "mixed"])

        if mutation in {"sparse", "mixed"}:
            if self._rng.random() < 0.5:
                manufacturer = None
            else:
                specs[self._rng.choice(list(specs))] = self._rng.choice([None, ""])

        if mutation in {"standard", "mixed"}:
            alternatives = [value for value in profile.standards if value != standard]
            standard = self._rng.choice(alternatives) if alternatives else None

        if mutation == "spec":
            name = self._rng.choice(list(specs))
            alternatives = [value for value in profile.spec_values[name] if value != specs[name]]
            if alternatives:
                specs[name] = self._rng.choice(alternatives)

        if self._rng.random() < 0.3:
            criticality = self._rng.randint(0, 5)

        return Item(
            id=item_id,
            display_name=source.display_name.upper() if self._rng.random() < 0.5 else f"{source.display_name} (old)",
            manufacturer=manufacturer,
            standard=standard,
            key_specs=MappingProxyType(specs),
            lifecycle=Lifecycle(criticality_score=criticality),
            category=source.category,
        )

    def _pair(self, pair_id: str, category: Category, profile: CategoryProfile, a: Item, b: Item) -> Pair:
        differences = _differences(a, b)
        similarity = round(max(0.5, 0.98 - 0.06 * len(differences) - self._rng.random() * 0.03), 2)
        risk_count = min(len(profile.risk_notes), 1 + self._rng.randint(0, 1))
        return Pair(
            pair_id=pair_id,
            category=category,
            a_id=a.id,
            b_id=b.id,
            similarity=similarity,
            differences=tuple(differences),
            risk_notes=tuple(self._rng.sample(profile.risk_notes, risk_count)),
        )


def _differences(a: Item, b: Item) -> list[str]:
    differences: list[str] = []
    if a.display_name != b.display_name:
        differences.append(f"Description: '{a.display_name}' vs '{b.display_name}'")
    if (a.manufacturer or "") != (b.manufacturer or ""):
        differences.append(f"Manufacturer: {a.manufacturer or 'missing'} vs {b.manufacturer or 'missing'}")
    if (a.standard or "") != (b.standard or ""):
        differences.append(f"Standard: {a.standard or 'missing'} vs {b.standard or 'missing'}")
    for name in a.key_specs:
        left = a.key_specs.get(name)
        right = b.key_specs.get(name)
        if (left or "") != (right or ""):
            differences.append(f"{name}: {left or 'missing'} vs {right or 'missing'}")
    return differences
