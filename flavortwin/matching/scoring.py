from __future__ import annotations

import math
from collections.abc import Mapping

from sklearn.metrics.pairwise import cosine_similarity

from ..flavor.builder import build_vector, is_zero, vector_to_array
from .config import DEFAULT_MATCH_CONFIG, MatchConfig
from .models import DEFAULT_NUTRIENTS, Dish, Nutrients, Score

_UNIT_TOLERANCE = 1e-12


def flavor_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Cosine similarity of two raw flavor vectors; 0.0 if either is all zero."""
    if is_zero(a) or is_zero(b):
        return 0.0
    va = vector_to_array(a).reshape(1, -1)
    vb = vector_to_array(b).reshape(1, -1)
    sim = float(cosine_similarity(va, vb)[0, 0])
    # normalize-then-dot leaves parallel vectors a few ulps short of 1
    if abs(1.0 - sim) < _UNIT_TOLERANCE:
        return 1.0
    # Flavor intensities are non-negative, so cosine lands in [0, 1].
    return max(0.0, min(1.0, sim))


def nutritional_parity(
    source: Nutrients | None,
    candidate: Nutrients | None,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> float:
    """How close two dishes are nutritionally, in [0, 1]."""
    if candidate is None:
        return config.missing_nutrient_parity
    source = source or DEFAULT_NUTRIENTS

    gap = (
        abs(candidate.energy - source.energy) / config.energy_scale
        + abs(candidate.protein - source.protein) / config.protein_scale
        + abs(candidate.carbs - source.carbs) / config.carbs_scale
    ) / 3
    return max(0.0, min(1.0, 1.0 - gap))


def combine(flavor_sim: float, nut_match: float, config: MatchConfig = DEFAULT_MATCH_CONFIG) -> float:
    return config.flavor_weight * flavor_sim + config.nutrient_weight * nut_match


def score_vectors(
    source: Dish,
    source_vector: Mapping[str, float],
    candidate: Dish,
    candidate_vector: Mapping[str, float],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> Score:
    """Score with vectors the caller already built (the engine's hot path)."""
    flavor_sim = flavor_similarity(source_vector, candidate_vector)
    nut_match = nutritional_parity(source.nutrients, candidate.nutrients, config)
    return Score(
        flavor_sim=flavor_sim,
        nut_match=nut_match,
        total=combine(flavor_sim, nut_match, config),
    )


def score(source: Dish, candidate: Dish, config: MatchConfig = DEFAULT_MATCH_CONFIG) -> Score:
    return score_vectors(
        source,
        build_vector(source.ingredients),
        candidate,
        build_vector(candidate.ingredients),
        config,
    )


def to_percent(value: float) -> int:
    """Round a [0, 1] value to an integer percentage, halves rounding up."""
    return int(math.floor(value * 100 + 0.5))
