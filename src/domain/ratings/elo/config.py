"""Load named Elo option presets from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_config, load_system_configs
from domain.ratings.common import InvalidInputError
from domain.ratings.elo.calculator import EloCalculationOptions
from domain.ratings.elo.constants import (
    K_FACTOR,
    MAX_ELO_RATING,
    MAX_RATING_CHANGE,
    MIN_ELO_RATING,
)


@dataclass(frozen=True)
class EloSystemConfig(BaseSystemConfig):
    """One named set of Elo calculation options."""

    options: EloCalculationOptions

    def as_config_json(self) -> dict[str, Any]:
        return {
            "k_factor": self.options.k_factor,
            "min_rating": self.options.min_rating,
            "max_rating": self.options.max_rating,
            "max_rating_change": self.options.max_rating_change,
        }


def load_elo_system_config(file_path: Path) -> EloSystemConfig:
    """Load and validate a single Elo preset file."""
    return load_system_config(file_path, _parse_elo_system_config)


def load_elo_system_configs(config_dir: Path) -> list[EloSystemConfig]:
    """Load and validate all Elo preset TOML files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_elo_system_config,
        duplicate_name_label="elo",
    )


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    system_raw = raw.get("system", {})
    elo_raw = raw.get("elo", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    try:
        options = EloCalculationOptions(
            k_factor=float(elo_raw.get("k_factor", K_FACTOR)),
            min_rating=float(elo_raw.get("min_rating", MIN_ELO_RATING)),
            max_rating=float(elo_raw.get("max_rating", MAX_ELO_RATING)),
            max_rating_change=float(elo_raw.get("max_rating_change", MAX_RATING_CHANGE)),
        )
    except InvalidInputError as exc:
        raise ValueError(f"{file_path}: [elo].{exc}") from exc

    return EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        options=options,
    )

