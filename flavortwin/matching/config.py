from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchConfig:
    flavor_weight: float = 0.7
    nutrient_weight: float = 0.3
    default_k: int = 3
    max_k: int = 10
    # parity assumed when a candidate carries no nutrient data
    missing_nutrient_parity: float = 0.8
    energy_scale: float = 1000.0
    protein_scale: float = 100.0
    carbs_scale: float = 200.0
    # raw intensity that reads as 100% in the per-dimension detail view
    bounded_scale_ceiling: float = 3.0


DEFAULT_MATCH_CONFIG = MatchConfig()
