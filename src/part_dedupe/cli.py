from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from part_dedupe.catalog import Catalog, describe_pair, find_pairs_by_category
from part_dedupe.config import ResolverSettings, load_settings
from part_dedupe.datasets import ReferenceCatalogGenerator
from part_dedupe.errors import ValidationError
from part_dedupe.interfaces import ResolutionPipeline
from part_dedupe.models import Item, Resolution
from part_dedupe.runners import LocalResolutionPipeline
from part_dedupe.schema import Category, item_to_mapping, parse_category
from part_dedupe.steps import completeness_score
from part_dedupe.steps.selection import CRITERION_LABELS
from part_dedupe.steps.value_added import DefaultValueAddedGenerator

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.env_file)
        _configure_logging(args.log_level or settings.log_level)

        if args.command == "generate-catalog":
            generate_catalog(seed=args.seed, pairs_per_category=args.pairs_per_category, output=args.output)
            return
        if args.command == "list-pairs":
            list_pairs(
                catalog=_load_catalog(args.catalog, args.seed),
                category=_category(args.category, settings),
            )
            return
        if args.command == "resolve":
            resolve(
                catalog=_load_catalog(args.catalog, args.seed),
                category=_category(args.category, settings),
                pair_id=args.pair_id,
                swapped=args.swap,
                settings=settings,
            )
            return
    except ValidationError as exc:
        logger.error("Validation failed: %s", exc)
        raise SystemExit(2) from exc

    parser.print_help()


def generate_catalog(*, seed: int, pairs_per_category: int, output: Path) -> None:
    catalog = ReferenceCatalogGenerator(seed=seed).generate(pairs_per_category=pairs_per_category)
    output.parent.mkdir(parents=True, exist_ok=True)
    _write_json(output, catalog.to_mapping())
    logger.info("Wrote %d items and %d pairs to %s", len(catalog.items), len(catalog.pairs), output)
    print(f"Catalog: {output}")


def list_pairs(*, catalog: Catalog, category: Category) -> None:
    pairs = find_pairs_by_category(catalog, category)
    if not pairs:
        print(f"No candidate pairs for category {category}")
        return
    for pair in pairs:
        print(f"{pair.pair_id}\t{describe_pair(catalog, pair)}")


def resolve(
    *,
    catalog: Catalog,
    category: Category,
    pair_id: str | None,
    swapped: bool,
    settings: ResolverSettings,
) -> None:
    pipeline: ResolutionPipeline = LocalResolutionPipeline(
        catalog=catalog,
        generator=DefaultValueAddedGenerator(
            high_criticality=settings.high_criticality,
            medium_criticality=settings.medium_criticality,
            high_similarity=settings.high_similarity,
        ),
    )
    resolution = pipeline.resolve(category, pair_id=pair_id, swapped=swapped)
    if resolution is None:
        print(f"No pair {pair_id or '(first)'} in category {category}")
        return
    print(json.dumps(_resolution_payload(resolution), indent=2, ensure_ascii=False))


def _resolution_payload(resolution: Resolution) -> dict[str, Any]:
    pair = resolution.pair
    return {
        "pair_id": pair.pair_id,
        "category": str(pair.category),
        "similarity": pair.similarity,
        "left": _item_payload(resolution.left),
        "right": _item_payload(resolution.right),
        "differences": list(pair.differences),
        "risk_notes": list(pair.risk_notes),
        "master": {
            "id": resolution.master.id,
            "display_name": resolution.master.display_name,
            "decided_by": resolution.decided_by,
            "reason": CRITERION_LABELS[resolution.decided_by],
        },
        "value_added": [asdict(output) for output in resolution.outputs],
    }


def _item_payload(item: Item) -> dict[str, Any]:
    payload = item_to_mapping(item)
    payload["completeness"] = completeness_score(item)
    return payload


def _load_catalog(path: Path | None, seed: int) -> Catalog:
    if path is None:
        return ReferenceCatalogGenerator(seed=seed).generate()
    with path.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValidationError(f"Catalog {path} is not valid JSON: {exc}") from exc
    return Catalog.from_mapping(payload)


def _category(value: str | None, settings: ResolverSettings) -> Category:
    return parse_category(value) if value else settings.default_category


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format=_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="part-dedupe", description="Part duplicate resolution CLI")
    parser.add_argument("--env-file", type=Path, default=None)
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None)
    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser("generate-catalog", help="Write a synthetic reference catalog as JSON")
    generate_parser.add_argument("--seed", type=int, default=42)
    generate_parser.add_argument("--pairs-per-category", type=int, default=3)
    generate_parser.add_argument("--output", type=Path, default=Path("data/reference_catalog.json"))

    categories = [category.value for category in Category]

    list_parser = subparsers.add_parser("list-pairs", help="List candidate duplicate pairs for a category")
    list_parser.add_argument("--category", choices=categories, default=None)
    list_parser.add_argument("--catalog", type=Path, default=None)
    list_parser.add_argument("--seed", type=int, default=42)

    resolve_parser = subparsers.add_parser("resolve", help="Pick a master record and print merge guidance")
    resolve_parser.add_argument("--category", choices=categories, default=None)
    resolve_parser.add_argument("--pair-id", type=str, default=None)
    resolve_parser.add_argument("--swap", action="store_true", help="Swap left/right presentation order")
    resolve_parser.add_argument("--catalog", type=Path, default=None)
    resolve_parser.add_argument("--seed", type=int, default=42)

    return parser


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


if __name__ == "__main__":
    main()
