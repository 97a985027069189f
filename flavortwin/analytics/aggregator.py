from __future__ import annotations

from collections import Counter
from typing import Any

SEARCH_EVENT = "twin_search"


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == SEARCH_EVENT]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Most requested source dishes
    query_counter: Counter[str] = Counter()
    for s in searches:
        query_counter[s.get("source", s.get("query", "unknown"))] += 1
    top_sources = [{"name": n, "count": c} for n, c in query_counter.most_common(10)]

    # Cuisines the twins came from
    cuisine_counter: Counter[str] = Counter()
    for s in searches:
        for c in s.get("twin_cuisines", []) or []:
            cuisine_counter[c] += 1
    top_twin_cuisines = [{"name": n, "count": c} for n, c in cuisine_counter.most_common(10)]

    origins = dict(Counter(s.get("origin", "unknown") for s in searches))

    empty = sum(1 for s in searches if s.get("results_returned", 0) == 0)

    top_scores = [s["top_similarity"] for s in searches if s.get("top_similarity") is not None]

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_sources": top_sources,
        "top_twin_cuisines": top_twin_cuisines,
        "resolution_origins": origins,
        "empty_result_rate": round(empty / total * 100, 1) if total else 0.0,
        "avg_top_similarity": round(sum(top_scores) / len(top_scores), 1) if top_scores else 0.0,
    }
