"""
Display scaling for flavor vectors.

Two distinct rescalings exist and must not be mixed up:

* ``normalize`` scales a whole vector so its strongest dimension reads 100.
  Ratios between dimensions of that vector are preserved. Used for the
  source dish's "flavor DNA" panel.
* ``bounded_scale`` scales every dimension against a fixed ceiling and
  clamps at 100, independent of the vector's own maximum. Used for a single
  candidate's detail view so weak profiles look weak.

Similarity is always computed on raw vectors; nothing here feeds ranking.
"""
from __future__ import annotations

from collections.abc import Mapping

from ..matching.config import DEFAULT_MATCH_CONFIG
from .dimensions import FLAVOR_DIMENSIONS, dimension_index
from .builder import FlavorVector


def normalize(vector: Mapping[str, float]) -> FlavorVector:
    peak = max(float(vector[dim]) for dim in FLAVOR_DIMENSIONS)
    if peak <= 0:
        return {dim: 0.0 for dim in FLAVOR_DIMENSIONS}
    return {dim: float(vector[dim]) / peak * 100.0 for dim in FLAVOR_DIMENSIONS}


def bounded_scale(
    vector: Mapping[str, float],
    ceiling: float = DEFAULT_MATCH_CONFIG.bounded_scale_ceiling,
) -> FlavorVector:
    if ceiling <= 0:
        raise ValueError("ceiling must be positive")
    return {
        dim: min(float(vector[dim]) / ceiling * 100.0, 100.0)
        for dim in FLAVOR_DIMENSIONS
    }


def describe_profile(vector: Mapping[str, float]) -> tuple[str, str] | None:
    """Return the (dominant, subtle) dimensions, or None for a flat-zero vector."""
    ranked = sorted(
        FLAVOR_DIMENSIONS,
        key=lambda dim: (-float(vector[dim]), dimension_index(dim)),
    )
    if float(vector[ranked[0]]) <= 0:
        return None
    return ranked[0], ranked[1]
