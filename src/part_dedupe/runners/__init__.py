from part_dedupe.runners.local import LocalResolutionPipeline

__all__ = ["LocalResolutionPipeline"]
