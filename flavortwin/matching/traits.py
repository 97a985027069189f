from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..flavor.dimensions import FLAVOR_DIMENSIONS, UNIQUE_TRAIT


def shared_traits(source: Mapping[str, float], candidate: Mapping[str, float]) -> list[str]:
    """Dimensions positive in both vectors, strongest combined intensity first.

    Ties keep dimension declaration order (``sorted`` is stable). Returns
    ``["Unique"]`` when nothing is shared.
    """
    shared = [dim for dim in FLAVOR_DIMENSIONS if source[dim] > 0 and candidate[dim] > 0]
    if not shared:
        return [UNIQUE_TRAIT]
    return sorted(shared, key=lambda dim: source[dim] + candidate[dim], reverse=True)


def explain_match(twin_name: str, traits: Sequence[str]) -> str:
    if not traits or traits[0] == UNIQUE_TRAIT:
        return f"{twin_name} shares no single flavor dimension but lines up nutritionally."
    if len(traits) == 1:
        return f"{twin_name} is a high-resonance match because both dishes share a dominant {traits[0]} trait."
    return (
        f"{twin_name} is a high-resonance match because both dishes share "
        f"dominant {traits[0]} and {traits[1]} traits."
    )
