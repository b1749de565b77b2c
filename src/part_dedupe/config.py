from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from part_dedupe.errors import ValidationError
from part_dedupe.schema import Category, parse_category

ENV_PREFIX = "PART_DEDUPE_"


@dataclass(frozen=True)
class ResolverSettings:
    """Tunables for the resolution pipeline and CLI."""

    default_category: Category = Category.SCREW
    high_criticality: int = 4
    medium_criticality: int = 2
    high_similarity: float = 0.9
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 <= self.medium_criticality <= self.high_criticality <= 5:
            raise ValidationError(
                f"Criticality thresholds must satisfy 0 <= medium ({self.medium_criticality}) "
                f"<= high ({self.high_criticality}) <= 5"
            )
        if not 0.0 <= self.high_similarity <= 1.0:
            raise ValidationError(f"high_similarity {self.high_similarity} is outside 0..1")
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValidationError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str | None]) -> "ResolverSettings":
        """Build settings from ``PART_DEDUPE_*`` keys; missing keys keep their defaults."""
        defaults = cls()

        def lookup(name: str) -> str | None:
            value = values.get(f"{ENV_PREFIX}{name}")
            return value.strip() if value and value.strip() else None

        try:
            return cls(
                default_category=parse_category(lookup("DEFAULT_CATEGORY") or defaults.default_category),
                high_criticality=int(lookup("HIGH_CRITICALITY") or defaults.high_criticality),
                medium_criticality=int(lookup("MEDIUM_CRITICALITY") or defaults.medium_criticality),
                high_similarity=float(lookup("HIGH_SIMILARITY") or defaults.high_similarity),
                log_level=(lookup("LOG_LEVEL") or defaults.log_level).upper(),
            )
        except ValidationError:
            raise
        except ValueError as exc:
            raise ValidationError(f"Invalid {ENV_PREFIX}* setting: {exc}") from exc


def load_settings(env_file: Path | None = None) -> ResolverSettings:
    """Read settings from an optional .env file, overridden by the process environment."""
    values: dict[str, str | None] = {}
    env_path = env_file if env_file is not None else Path.cwd() / ".env"
    if env_path.exists():
        values.update(dotenv_values(env_path))
    values.update({key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)})
    return ResolverSettings.from_mapping(values)
