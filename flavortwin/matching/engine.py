"""
Flavor twin engine.

Pipeline per request:
1. Build the source dish's raw flavor vector.
2. Keep catalog dishes with a different name *and* a different cuisine.
3. Score every survivor and extract shared traits.
4. Stable-sort by similarity (catalog order breaks ties) and keep the top k.

The engine never performs I/O. Stage narration is optional and delivered
through ``on_progress``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..flavor.builder import build_vector
from ..flavor.normalizer import bounded_scale, describe_profile, normalize
from .config import DEFAULT_MATCH_CONFIG, MatchConfig
from .models import Dish, MatchResult, MatchStage, SourceProfile
from .scoring import score_vectors, to_percent
from .traits import explain_match, shared_traits

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[MatchStage], None]


def _notify(on_progress: ProgressCallback | None, stage: MatchStage) -> None:
    if on_progress is not None:
        on_progress(stage)


def is_eligible(source: Dish, candidate: Dish) -> bool:
    """Cross-cuisine rule: a twin never shares the source's name or cuisine."""
    return candidate.key != source.key and candidate.cuisine != source.cuisine


def profile_source(source: Dish) -> SourceProfile:
    raw = build_vector(source.ingredients)
    profile = describe_profile(raw)
    dominant, subtle = profile if profile else (None, None)
    return SourceProfile(
        dish=source,
        raw_vector=raw,
        display_vector=normalize(raw),
        dominant=dominant,
        subtle=subtle,
    )


def find_twins(
    source: Dish,
    catalog: Sequence[Dish],
    k: int = DEFAULT_MATCH_CONFIG.default_k,
    on_progress: ProgressCallback | None = None,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> list[MatchResult]:
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    _notify(on_progress, MatchStage.mapping_dimensions)
    source_vector = build_vector(source.ingredients)

    _notify(on_progress, MatchStage.scanning_catalog)
    candidates = [dish for dish in catalog if is_eligible(source, dish)]
    logger.debug(
        "Scoring %d of %d catalog dishes against %r",
        len(candidates), len(catalog), source.name,
    )

    results: list[MatchResult] = []
    for candidate in candidates:
        candidate_vector = build_vector(candidate.ingredients)
        s = score_vectors(source, source_vector, candidate, candidate_vector, config)
        traits = shared_traits(source_vector, candidate_vector)
        results.append(MatchResult(
            dish=candidate,
            similarity=to_percent(s.total),
            flavor_sim=to_percent(s.flavor_sim),
            nut_match=to_percent(s.nut_match),
            shared_traits=traits,
            explanation=explain_match(candidate.name, traits),
            flavor_profile=bounded_scale(candidate_vector, config.bounded_scale_ceiling),
        ))

    _notify(on_progress, MatchStage.finalizing)
    # list.sort is stable, so equal similarities keep catalog order
    results.sort(key=lambda r: r.similarity, reverse=True)
    return results[:k]
