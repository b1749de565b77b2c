import pytest

from part_dedupe.catalog import Catalog
from part_dedupe.datasets import ReferenceCatalogGenerator
from part_dedupe.errors import ValidationError
from part_dedupe.runners import LocalResolutionPipeline
from part_dedupe.steps.value_added import MASTER_TITLE


def test_pipeline_resolves_first_pair_of_category_by_default(catalog) -> None:
    resolution = LocalResolutionPipeline(catalog).resolve("Screw")

    assert resolution is not None
    assert resolution.pair.pair_id == "P-SCR-001"
    assert resolution.master.id == "SCR-1"
    assert resolution.duplicate.id == "SCR-2"
    assert resolution.decided_by == "completeness"
    assert resolution.outputs[0].title == MASTER_TITLE


def test_pipeline_resolves_requested_pair(catalog) -> None:
    resolution = LocalResolutionPipeline(catalog).resolve("Screw", pair_id="P-SCR-002")

    assert resolution.master.id == "SCR-4"
    assert resolution.decided_by == "iso_standard"


def test_swap_changes_presentation_not_master(catalog) -> None:
    pipeline = LocalResolutionPipeline(catalog)
    straight = pipeline.resolve("Valve")
    swapped = pipeline.resolve("Valve", swapped=True)

    assert (straight.left.id, straight.right.id) == ("VAL-1", "VAL-2")
    assert (swapped.left.id, swapped.right.id) == ("VAL-2", "VAL-1")
    assert swapped.master.id == straight.master.id == "VAL-1"
    assert swapped.outputs == straight.outputs


def test_no_pair_to_resolve(catalog) -> None:
    pipeline = LocalResolutionPipeline(catalog)

    assert pipeline.resolve("Bearing") is None
    assert pipeline.resolve("Screw", pair_id="P-SCR-999") is None
    assert pipeline.resolve("Valve", pair_id="P-SCR-001") is None


def test_validation_fault_is_surfaced(raw_catalog) -> None:
    raw_catalog["pairs"][0]["aId"] = "SCR-404"
    pipeline = LocalResolutionPipeline(Catalog.from_mapping(raw_catalog))

    with pytest.raises(ValidationError):
        pipeline.resolve("Screw")


def test_replace_catalog_swaps_dataset_wholesale(catalog) -> None:
    pipeline = LocalResolutionPipeline(catalog)
    pipeline.replace_catalog(Catalog(items=[], pairs=[]))

    assert pipeline.resolve("Screw") is None
    assert len(catalog.pairs) == 3


def test_pipeline_resolves_every_generated_pair() -> None:
    catalog = ReferenceCatalogGenerator(seed=11).generate(pairs_per_category=2)
    pipeline = LocalResolutionPipeline(catalog)

    for pair in catalog.pairs:
        resolution = pipeline.resolve(pair.category, pair_id=pair.pair_id)
        assert resolution.master.id in {pair.a_id, pair.b_id}
        assert len({output.title for output in resolution.outputs}) == len(resolution.outputs) == 5
