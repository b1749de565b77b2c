import copy

import pytest

from part_dedupe.catalog import (
    Catalog,
    describe_pair,
    find_item,
    find_pair,
    find_pairs_by_category,
    resolve_pair_items,
    similarity_percent,
)
from part_dedupe.errors import ValidationError
from part_dedupe.schema import Category


class TestLookups:
    """Read-only accessors over a parsed catalog."""

    def test_find_item_by_id(self, catalog):
        item = find_item(catalog, "SCR-2")
        assert item is not None
        assert item.display_name == "CAP SCREW M8X25"
        assert item.manufacturer is None
        assert item.key_specs["length"] == ""

    def test_unknown_item_is_absent(self, catalog):
        assert find_item(catalog, "NOPE") is None
        assert find_item(catalog, "") is None
        assert find_item(catalog, None) is None

    def test_pairs_by_category_preserve_catalog_order(self, catalog):
        pairs = find_pairs_by_category(catalog, "Screw")
        assert [pair.pair_id for pair in pairs] == ["P-SCR-001", "P-SCR-002"]
        assert all(pair.category == Category.SCREW for pair in pairs)

    def test_pairs_by_category_accepts_enum(self, catalog):
        assert [pair.pair_id for pair in find_pairs_by_category(catalog, Category.VALVE)] == ["P-VAL-001"]

    def test_unknown_or_empty_category_returns_empty(self, catalog):
        assert find_pairs_by_category(catalog, "Bearing") == []
        assert find_pairs_by_category(catalog, "Widget") == []

    def test_find_pair_is_scoped_to_category(self, catalog):
        assert find_pair(catalog, "Screw", "P-SCR-002").a_id == "SCR-3"
        assert find_pair(catalog, "Valve", "P-SCR-002") is None
        assert find_pair(catalog, "Screw", None) is None

    def test_describe_pair_label(self, catalog):
        pair = find_pair(catalog, "Screw", "P-SCR-001")
        assert describe_pair(catalog, pair) == "Cap Screw M8x25 ↔ CAP SCREW M8X25 (91%)"

    def test_similarity_percent_rounds_half_up(self):
        assert similarity_percent(0.875) == 88
        assert similarity_percent(0.0) == 0
        assert similarity_percent(1.0) == 100

    def test_round_trip_through_mapping(self, catalog):
        rebuilt = Catalog.from_mapping(catalog.to_mapping())
        assert [item.id for item in rebuilt.items] == [item.id for item in catalog.items]
        assert rebuilt.pairs == catalog.pairs


class TestResolvePairItems:
    """Inconsistent pairs must fail loudly instead of yielding a master."""

    def test_returns_items_in_pair_order(self, catalog):
        pair = find_pair(catalog, "Valve", "P-VAL-001")
        item_a, item_b = resolve_pair_items(catalog, pair)
        assert (item_a.id, item_b.id) == ("VAL-1", "VAL-2")

    def test_same_item_twice_is_rejected(self, raw_catalog):
        raw_catalog["pairs"][0]["bId"] = "SCR-1"
        catalog = Catalog.from_mapping(raw_catalog)
        with pytest.raises(ValidationError) as exc_info:
            resolve_pair_items(catalog, catalog.pairs[0])
        assert exc_info.value.pair_id == "P-SCR-001"

    def test_dangling_reference_is_rejected(self, raw_catalog):
        raw_catalog["pairs"][0]["bId"] = "SCR-404"
        catalog = Catalog.from_mapping(raw_catalog)
        with pytest.raises(ValidationError) as exc_info:
            resolve_pair_items(catalog, catalog.pairs[0])
        assert exc_info.value.item_id == "SCR-404"

    def test_category_mismatch_is_rejected(self, raw_catalog):
        raw_catalog["pairs"][0]["bId"] = "VAL-2"
        catalog = Catalog.from_mapping(raw_catalog)
        with pytest.raises(ValidationError, match="Valve"):
            resolve_pair_items(catalog, catalog.pairs[0])

    def test_items_without_category_are_accepted(self, raw_catalog):
        for raw in raw_catalog["items"]:
            raw.pop("category")
        catalog = Catalog.from_mapping(raw_catalog)
        item_a, item_b = resolve_pair_items(catalog, catalog.pairs[0])
        assert item_a.category is None and item_b.id == "SCR-2"


class TestCatalogValidation:
    """Load-time checks on the injected dataset."""

    def test_duplicate_item_ids(self, raw_catalog):
        raw_catalog["items"].append(copy.deepcopy(raw_catalog["items"][0]))
        with pytest.raises(ValidationError, match="Duplicate item id"):
            Catalog.from_mapping(raw_catalog)

    def test_duplicate_pair_ids(self, raw_catalog):
        raw_catalog["pairs"].append(copy.deepcopy(raw_catalog["pairs"][0]))
        with pytest.raises(ValidationError, match="Duplicate pair id"):
            Catalog.from_mapping(raw_catalog)

    @pytest.mark.parametrize("score", [-1, 6, "3", 2.5])
    def test_criticality_outside_range(self, raw_catalog, score):
        raw_catalog["items"][0]["lifecycle"]["criticalityScore"] = score
        with pytest.raises(ValidationError, match="criticalityScore"):
            Catalog.from_mapping(raw_catalog)

    @pytest.mark.parametrize("similarity", [-0.1, 1.5])
    def test_similarity_outside_range(self, raw_catalog, similarity):
        raw_catalog["pairs"][0]["similarity"] = similarity
        with pytest.raises(ValidationError, match="similarity"):
            Catalog.from_mapping(raw_catalog)

    def test_unknown_category(self, raw_catalog):
        raw_catalog["pairs"][0]["category"] = "Widget"
        with pytest.raises(ValidationError, match="Unknown category"):
            Catalog.from_mapping(raw_catalog)

    def test_missing_lifecycle_is_allowed(self, raw_catalog):
        raw_catalog["items"][0].pop("lifecycle")
        catalog = Catalog.from_mapping(raw_catalog)
        assert find_item(catalog, "SCR-1").lifecycle is None


class TestMalformedShapes:
    """Wrong JSON shapes surface as ValidationError, never as raw exceptions."""

    def test_lifecycle_must_be_an_object(self, raw_catalog):
        raw_catalog["items"][0]["lifecycle"] = 3
        with pytest.raises(ValidationError, match="SCR-1 lifecycle must be an object"):
            Catalog.from_mapping(raw_catalog)

    def test_key_specs_must_be_an_object(self, raw_catalog):
        raw_catalog["items"][0]["keySpecs"] = ["thread"]
        with pytest.raises(ValidationError, match="SCR-1 keySpecs must be an object"):
            Catalog.from_mapping(raw_catalog)

    def test_items_must_be_a_list_of_objects(self, raw_catalog):
        raw_catalog["items"] = [raw_catalog["items"][0], "SCR-2"]
        with pytest.raises(ValidationError, match="items entry must be an object"):
            Catalog.from_mapping(raw_catalog)

    def test_pairs_must_be_a_list(self, raw_catalog):
        raw_catalog["pairs"] = {"P-SCR-001": raw_catalog["pairs"][0]}
        with pytest.raises(ValidationError, match="pairs must be a list"):
            Catalog.from_mapping(raw_catalog)

    def test_risk_notes_must_be_a_list(self, raw_catalog):
        raw_catalog["pairs"][0]["riskNotes"] = "Property class mismatch"
        with pytest.raises(ValidationError, match="riskNotes must be a list"):
            Catalog.from_mapping(raw_catalog)

    def test_catalog_must_be_an_object(self):
        with pytest.raises(ValidationError, match="Catalog must be an object"):
            Catalog.from_mapping([])
