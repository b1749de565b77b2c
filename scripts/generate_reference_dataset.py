from __future__ import annotations

import argparse
import json
from pathlib import Path

from part_dedupe.datasets import ReferenceCatalogGenerator
from part_dedupe.schema import Category


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a synthetic parts catalog with near-duplicate pairs")
    parser.add_argument("--pairs-per-category", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--category", action="append", choices=[c.value for c in Category], default=None)
    parser.add_argument("--output", type=Path, default=Path("data/reference_parts_catalog.json"))
    args = parser.parse_args()

    categories = [Category(value) for value in args.category] if args.category else None
    catalog = ReferenceCatalogGenerator(seed=args.seed).generate(
        categories=categories,
        pairs_per_category=args.pairs_per_category,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as handle:
        json.dump(catalog.to_mapping(), handle, indent=2, ensure_ascii=False)


if __name__ == "__main__":
    main()
