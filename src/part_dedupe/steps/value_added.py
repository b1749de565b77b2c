"""Enrichment cards that turn a resolved pair into operator guidance.

Every card is derived from the pair annotations and both items, so the same
inputs always produce the same cards in the same order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from part_dedupe.catalog import similarity_percent, validate_pair_items
from part_dedupe.models import Item, Pair, ValueAddedOutput
from part_dedupe.steps.scoring import completeness_score, criticality_score, has_iso_standard
from part_dedupe.steps.selection import CRITERION_LABELS, explain_selection

logger = logging.getLogger(__name__)

MASTER_TITLE = "Master record recommendation"
SPECS_TITLE = "Reconciled key specs"
SOURCING_TITLE = "Manufacturer and standard consolidation"
DIFFERENCES_TITLE = "Differences to review"
RISK_TITLE = "Merge risk controls"


class DefaultValueAddedGenerator:
    """Builds the five standard enrichment cards for a pair."""

    def __init__(
        self,
        high_criticality: int = 4,
        medium_criticality: int = 2,
        high_similarity: float = 0.9,
    ) -> None:
        self._high_criticality = high_criticality
        self._medium_criticality = medium_criticality
        self._high_similarity = high_similarity

    def generate(self, pair: Pair | None, item_a: Item | None, item_b: Item | None) -> list[ValueAddedOutput]:
        if pair is None or item_a is None or item_b is None:
            return []
        validate_pair_items(pair, item_a, item_b)

        master, criterion = explain_selection(item_a, item_b)
        duplicate = item_b if master is item_a else item_a

        outputs = [
            self._master_card(pair, master, duplicate, criterion),
            self._specs_card(master, duplicate),
            self._sourcing_card(master, duplicate),
            self._differences_card(pair, item_a, item_b),
            self._risk_card(pair, item_a, item_b),
        ]
        logger.debug("Generated %d value-added outputs for pair %s", len(outputs), pair.pair_id)
        return outputs

    def _master_card(self, pair: Pair, master: Item, duplicate: Item, criterion: str) -> ValueAddedOutput:
        return ValueAddedOutput(
            title=MASTER_TITLE,
            summary=(
                f"Keep {master.display_name} ({master.id}) as the master record and retire "
                f"{duplicate.display_name} ({duplicate.id})."
            ),
            bullets=(
                f"Decided by {criterion}: {CRITERION_LABELS[criterion]}.",
                f"Completeness: {master.id} scores {completeness_score(master)}, "
                f"{duplicate.id} scores {completeness_score(duplicate)}.",
                f"Criticality: {master.id} is {criticality_score(master)}/5, "
                f"{duplicate.id} is {criticality_score(duplicate)}/5.",
                f"Pair similarity: {similarity_percent(pair.similarity)}%.",
            ),
        )

    def _specs_card(self, master: Item, duplicate: Item) -> ValueAddedOutput:
        names = _ordered_spec_names(master.key_specs, duplicate.key_specs)
        if not names:
            return ValueAddedOutput(
                title=SPECS_TITLE,
                summary="No key specs to reconcile.",
                bullets=("Neither record carries key specs; capture them before merging.",),
            )

        bullets: list[str] = []
        agree = filled = conflicts = 0
        for name in names:
            master_value = master.key_specs.get(name)
            duplicate_value = duplicate.key_specs.get(name)
            outcome, text = _reconcile(name, master_value, duplicate_value, duplicate.id)
            if outcome == "agree":
                agree += 1
            elif outcome == "fill":
                filled += 1
            elif outcome == "conflict":
                conflicts += 1
            bullets.append(text)

        return ValueAddedOutput(
            title=SPECS_TITLE,
            summary=(
                f"{len(names)} spec fields compared: {agree} agree, {filled} can be filled from "
                f"{duplicate.id}, {conflicts} conflict."
            ),
            bullets=tuple(bullets),
        )

    def _sourcing_card(self, master: Item, duplicate: Item) -> ValueAddedOutput:
        manufacturer = master.manufacturer or duplicate.manufacturer
        standard = master.standard or duplicate.standard

        bullets = [
            _reconcile("Manufacturer", master.manufacturer, duplicate.manufacturer, duplicate.id)[1],
            _reconcile("Standard", master.standard, duplicate.standard, duplicate.id)[1],
        ]
        if has_iso_standard(master) or has_iso_standard(duplicate):
            iso_source = master if has_iso_standard(master) else duplicate
            bullets.append(f"ISO reference available from {iso_source.id}: {iso_source.standard}.")
        else:
            bullets.append("No ISO reference on either record; map to an ISO equivalent if one exists.")

        return ValueAddedOutput(
            title=SOURCING_TITLE,
            summary=(
                f"Consolidated record carries manufacturer {manufacturer or 'unknown'} "
                f"and standard {standard or 'unknown'}."
            ),
            bullets=tuple(bullets),
        )

    def _differences_card(self, pair: Pair, item_a: Item, item_b: Item) -> ValueAddedOutput:
        if not pair.differences:
            return ValueAddedOutput(
                title=DIFFERENCES_TITLE,
                summary=f"No differences recorded between {item_a.id} and {item_b.id}.",
                bullets=("Confirm the records are interchangeable before merging.",),
            )
        count = len(pair.differences)
        return ValueAddedOutput(
            title=DIFFERENCES_TITLE,
            summary=(
                f"{count} difference{'s' if count != 1 else ''} recorded between {item_a.id} and {item_b.id}; "
                f"first: {pair.differences[0]}."
            ),
            bullets=tuple(pair.differences),
        )

    def _risk_card(self, pair: Pair, item_a: Item, item_b: Item) -> ValueAddedOutput:
        criticality = max(criticality_score(item_a), criticality_score(item_b))
        percent = similarity_percent(pair.similarity)

        if criticality >= self._high_criticality:
            level = "High"
            guidance = f"Route to engineering sign-off before merging (criticality {criticality}/5)."
        elif criticality >= self._medium_criticality:
            level = "Medium"
            guidance = f"Have a data steward confirm the merge (criticality {criticality}/5)."
        else:
            level = "Low"
            guidance = f"Eligible for the standard merge workflow (criticality {criticality}/5)."

        threshold = similarity_percent(self._high_similarity)
        if pair.similarity >= self._high_similarity:
            band = f"Similarity {percent}% is within the {threshold}% auto-suggest band."
        else:
            band = f"Similarity {percent}% is below {threshold}%; compare the differences field by field."

        risks = list(pair.risk_notes) or ["No risk notes recorded for this pair."]
        summary = f"{level} priority review for {len(pair.risk_notes)} recorded risk(s)"
        if pair.risk_notes:
            summary += f", led by: {pair.risk_notes[0]}"

        return ValueAddedOutput(
            title=RISK_TITLE,
            summary=summary + ".",
            bullets=tuple([*risks, guidance, band]),
        )


_DEFAULT_GENERATOR = DefaultValueAddedGenerator()


def generate_value_added(pair: Pair | None, item_a: Item | None, item_b: Item | None) -> list[ValueAddedOutput]:
    return _DEFAULT_GENERATOR.generate(pair, item_a, item_b)


def _ordered_spec_names(master_specs: Mapping[str, object], duplicate_specs: Mapping[str, object]) -> list[str]:
    names = list(master_specs)
    names.extend(name for name in duplicate_specs if name not in master_specs)
    return names


def _reconcile(label: str, master_value: object, duplicate_value: object, duplicate_id: str) -> tuple[str, str]:
    has_master = _present(master_value)
    has_duplicate = _present(duplicate_value)

    if has_master and has_duplicate:
        if _normalized(master_value) == _normalized(duplicate_value):
            return "agree", f"{label}: {master_value} (both records agree)."
        return "conflict", f"{label}: {master_value} vs {duplicate_value} (conflict; verify before merge)."
    if has_master:
        return "master", f"{label}: {master_value} (master only)."
    if has_duplicate:
        return "fill", f"{label}: {duplicate_value} (fill from {duplicate_id})."
    return "missing", f"{label}: unspecified on both records."


def _present(value: object) -> bool:
    return value is not None and value != ""


def _normalized(value: object) -> str:
    return " ".join(str(value).split()).lower()
