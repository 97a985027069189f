from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np

from .dimensions import FLAVOR_DIMENSIONS, INGREDIENT_RULES, empty_vector

FlavorVector = dict[str, float]


def matched_keywords(
    ingredient: str,
    rules: Mapping[str, Mapping[str, float]] = INGREDIENT_RULES,
) -> list[str]:
    """Return the rule keywords that apply to a single ingredient.

    A keyword found inside a longer matching keyword is dropped, so
    "coconut milk" applies only its own rule and not "coconut" or "milk".
    """
    text = ingredient.strip().lower()
    if not text:
        return []
    hits = [kw for kw in rules if kw in text]
    return [kw for kw in hits if not any(kw != other and kw in other for other in hits)]


def _ingredient_contribution(
    ingredient: str,
    rules: Mapping[str, Mapping[str, float]],
) -> dict[str, float]:
    # Each dimension counts once per ingredient, at its strongest weight.
    contribution: dict[str, float] = {}
    for kw in matched_keywords(ingredient, rules):
        for dim, weight in rules[kw].items():
            contribution[dim] = max(contribution.get(dim, 0.0), float(weight))
    return contribution


def build_vector(
    ingredients: Iterable[str],
    rules: Mapping[str, Mapping[str, float]] = INGREDIENT_RULES,
) -> FlavorVector:
    """Map an ingredient list onto a raw (un-normalized) flavor vector."""
    if ingredients is None:
        raise TypeError("ingredients must be a sequence of strings, not None")

    vector = empty_vector()
    for ingredient in ingredients:
        for dim, weight in _ingredient_contribution(str(ingredient), rules).items():
            vector[dim] += weight
    return vector


def vector_to_array(vector: Mapping[str, float]) -> np.ndarray:
    """Return *vector* as a 1-D array in dimension declaration order."""
    return np.array([float(vector[dim]) for dim in FLAVOR_DIMENSIONS], dtype=float)


def is_zero(vector: Mapping[str, float]) -> bool:
    return not any(vector[dim] > 0 for dim in FLAVOR_DIMENSIONS)
