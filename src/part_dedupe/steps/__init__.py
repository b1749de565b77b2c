from part_dedupe.steps.scoring import completeness_score, criticality_score, has_iso_standard
from part_dedupe.steps.selection import explain_selection, select_master
from part_dedupe.steps.value_added import DefaultValueAddedGenerator, generate_value_added

__all__ = [
    "completeness_score",
    "criticality_score",
    "has_iso_standard",
    "explain_selection",
    "select_master",
    "DefaultValueAddedGenerator",
    "generate_value_added",
]
