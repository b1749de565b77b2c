from __future__ import annotations

import logging

from part_dedupe.catalog import Catalog, find_pair, find_pairs_by_category, resolve_pair_items
from part_dedupe.interfaces import ValueAddedGenerator
from part_dedupe.models import Resolution
from part_dedupe.steps.selection import explain_selection
from part_dedupe.steps.value_added import DefaultValueAddedGenerator

logger = logging.getLogger(__name__)


class LocalResolutionPipeline:
    """In-process resolver: category + pair id in, master and enrichment out.

    Holds a reference to the catalog only; swap it with ``replace_catalog`` when
    the dataset is refreshed.
    """

    def __init__(
        self,
        catalog: Catalog,
        generator: ValueAddedGenerator | None = None,
    ) -> None:
        self._catalog = catalog
        self._generator = generator or DefaultValueAddedGenerator()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def replace_catalog(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def resolve(self, category: str, pair_id: str | None = None, swapped: bool = False) -> Resolution | None:
        catalog = self._catalog
        if pair_id is None:
            pairs = find_pairs_by_category(catalog, category)
            pair = pairs[0] if pairs else None
        else:
            pair = find_pair(catalog, category, pair_id)

        if pair is None:
            logger.info("No pair to resolve for category=%s pair_id=%s", category, pair_id)
            return None

        item_a, item_b = resolve_pair_items(catalog, pair)
        master, decided_by = explain_selection(item_a, item_b)

        logger.info("Resolved pair %s: master=%s (%s)", pair.pair_id, master.id, decided_by)
        return Resolution(
            pair=pair,
            item_a=item_a,
            item_b=item_b,
            master=master,
            decided_by=decided_by,
            outputs=tuple(self._generator.generate(pair, item_a, item_b)),
            swapped=swapped,
        )
