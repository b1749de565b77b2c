"""Master record selection for a candidate duplicate pair.

The criteria form a strict priority chain rather than a weighted sum: each one
only breaks ties left by the previous one.

1. completeness score (strictly greater wins)
2. criticality score (``a`` keeps ties)
3. exactly one of the two standards mentions ISO
4. fallback to ``a``
"""

from __future__ import annotations

import logging

from part_dedupe.models import Item
from part_dedupe.steps.scoring import completeness_score, criticality_score, has_iso_standard

logger = logging.getLogger(__name__)

COMPLETENESS = "completeness"
CRITICALITY = "criticality"
ISO_STANDARD = "iso_standard"
FALLBACK = "fallback"

CRITERION_LABELS = {
    COMPLETENESS: "more populated fields (manufacturer, standard, key specs)",
    CRITICALITY: "higher lifecycle criticality score",
    ISO_STANDARD: "references an ISO standard",
    FALLBACK: "all criteria tied; first record of the pair kept",
}


def explain_selection(a: Item | None, b: Item | None) -> tuple[Item | None, str | None]:
    """Return the master and the name of the criterion that decided it."""
    if a is None or b is None:
        return None, None

    score_a = completeness_score(a)
    score_b = completeness_score(b)
    if score_a != score_b:
        return (a if score_a > score_b else b), COMPLETENESS

    crit_a = criticality_score(a)
    crit_b = criticality_score(b)
    if crit_a != crit_b:
        return (a if crit_a >= crit_b else b), CRITICALITY

    iso_a = has_iso_standard(a)
    iso_b = has_iso_standard(b)
    if iso_a and not iso_b:
        return a, ISO_STANDARD
    if iso_b and not iso_a:
        return b, ISO_STANDARD

    return a, FALLBACK


def select_master(a: Item | None, b: Item | None) -> Item | None:
    master, criterion = explain_selection(a, b)
    if master is not None:
        logger.debug("Selected %s over %s by %s", master.id, (b if master is a else a).id, criterion)
    return master
