from part_dedupe.datasets.profiles import CATEGORY_PROFILES, CategoryProfile
from part_dedupe.datasets.reference import ReferenceCatalogGenerator

__all__ = ["CATEGORY_PROFILES", "CategoryProfile", "ReferenceCatalogGenerator"]
