from __future__ import annotations

import logging
import time

from fastapi import Depends, FastAPI, HTTPException

from .analytics.aggregator import SEARCH_EVENT, compute_analytics
from .analytics.store import get_events, record_event
from .catalog.store import get_catalog, get_dataframe
from .flavor.builder import build_vector, matched_keywords
from .flavor.dimensions import FLAVOR_DIMENSIONS, TABLE_VERSION
from .flavor.normalizer import bounded_scale, describe_profile, normalize
from .matching.engine import find_twins, is_eligible, profile_source
from .matching.models import (
    MatchStage,
    TwinRequest,
    TwinResponse,
    VectorRequest,
    VectorResponse,
)
from .provider.client import ProviderError, RecipeProvider
from .provider.resolver import UnresolvedSource, resolve_source

logger = logging.getLogger(__name__)

app = FastAPI(title="Flavor Twin API", version="1.0.0")

_provider = RecipeProvider()


def get_provider() -> RecipeProvider:
    return _provider


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    df = get_dataframe()
    return {
        "cuisines": sorted(df["cuisine"].dropna().unique().tolist()),
        "continents": sorted(df["continent"].dropna().unique().tolist()),
        "dimensions": list(FLAVOR_DIMENSIONS),
        "table_version": TABLE_VERSION,
        "catalog_size": len(get_catalog()),
    }


@app.post("/vector", response_model=VectorResponse)
def vector(body: VectorRequest) -> VectorResponse:
    raw = build_vector(body.ingredients)
    profile = describe_profile(raw)
    dominant, subtle = profile if profile else (None, None)
    return VectorResponse(
        raw=raw,
        display=normalize(raw),
        bounded=bounded_scale(raw),
        dominant=dominant,
        subtle=subtle,
        matches={i: matched_keywords(i) for i in body.ingredients},
    )


@app.post("/twins", response_model=TwinResponse)
async def twins(
    body: TwinRequest,
    provider: RecipeProvider = Depends(get_provider),
) -> TwinResponse:
    start_time = time.time()
    stages: list[MatchStage] = []
    catalog = get_catalog()

    try:
        resolved = await resolve_source(body.dish, catalog, provider, on_progress=stages.append)
    except UnresolvedSource as exc:
        logger.info("Could not resolve %r: %s", body.dish, exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ProviderError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    source = resolved.dish
    results = find_twins(source, catalog, k=body.k, on_progress=stages.append)
    total_candidates = sum(1 for dish in catalog if is_eligible(source, dish))

    message = None
    if not results:
        message = f"No cross-cuisine flavor twins found for {source.name}."

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event(SEARCH_EVENT, {
        "query": body.dish,
        "source": source.name,
        "origin": resolved.origin.value,
        "total_candidates": total_candidates,
        "results_returned": len(results),
        "twin_cuisines": [r.dish.cuisine for r in results],
        "top_similarity": results[0].similarity if results else None,
        "response_time_ms": elapsed_ms,
    })

    return TwinResponse(
        source=profile_source(source),
        twins=results,
        total_candidates=total_candidates,
        origin=resolved.origin,
        stages=[stage.value for stage in stages],
        message=message,
    )


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
