from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..matching.engine import ProgressCallback
from ..matching.models import DEFAULT_NUTRIENTS, Dish, MatchStage, ResolutionOrigin
from .client import RecipeProvider
from .mapping import map_raw_recipe, stub_id

logger = logging.getLogger(__name__)


class UnresolvedSource(LookupError):
    """A free-text dish name could not be turned into a Dish."""


@dataclass(frozen=True)
class ResolvedSource:
    dish: Dish
    origin: ResolutionOrigin


def find_local(query: str, catalog: Sequence[Dish]) -> Dish | None:
    """First catalog dish whose name contains *query*, case-insensitively."""
    needle = query.strip().lower()
    if not needle:
        return None
    for dish in catalog:
        if needle in dish.key:
            return dish
    return None


async def resolve_source(
    query: str,
    catalog: Sequence[Dish],
    provider: RecipeProvider | None = None,
    on_progress: ProgressCallback | None = None,
) -> ResolvedSource:
    """
    Resolve *query* to a source dish.

    Looks in the local catalog first and only then asks the remote
    provider. Raises ``UnresolvedSource`` when nothing usable is found and
    lets ``ProviderError`` propagate when the provider itself fails.
    """
    if on_progress is not None:
        on_progress(MatchStage.locating_source)

    if not query or not query.strip():
        raise UnresolvedSource("empty dish query")

    local = find_local(query, catalog)
    if local is not None:
        dish = local if local.nutrients is not None else local.model_copy(
            update={"nutrients": DEFAULT_NUTRIENTS}
        )
        return ResolvedSource(dish=dish, origin=ResolutionOrigin.catalog)

    if provider is None or not provider.config.is_configured:
        raise UnresolvedSource(f"{query!r} is not in the catalog and no recipe provider is configured")

    hits = await provider.search_by_title(query, page=1, limit=1)
    if not hits:
        raise UnresolvedSource(f"recipe {query!r} not found")
    first = hits[0]

    if on_progress is not None:
        on_progress(MatchStage.parsing_detail)

    recipe_id = stub_id(first)
    detail = await provider.get_detail(recipe_id) if recipe_id is not None else {}

    try:
        dish = map_raw_recipe(detail or first, stub=first)
    except ValueError as exc:
        logger.warning("Provider record for %r is unusable: %s", query, exc)
        raise UnresolvedSource(f"recipe {query!r} has no usable ingredient list") from exc

    logger.info("Resolved %r via provider as %r", query, dish.name)
    return ResolvedSource(dish=dish, origin=ResolutionOrigin.provider)
