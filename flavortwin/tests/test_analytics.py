from flavortwin.analytics.aggregator import SEARCH_EVENT, compute_analytics
from flavortwin.analytics.config import DEFAULT_ANALYTICS_CONFIG
from flavortwin.analytics.store import clear_events, get_events, record_event


def test_compute_analytics_empty():
    body = compute_analytics([])
    assert body["total_searches"] == 0
    assert body["avg_response_time_ms"] == 0.0
    assert body["empty_result_rate"] == 0.0


def test_compute_analytics_aggregates_searches():
    events = [
        {"type": SEARCH_EVENT, "source": "Pad Thai", "origin": "catalog", "results_returned": 3,
         "twin_cuisines": ["Indian", "Mexican", "Indian"], "top_similarity": 80, "response_time_ms": 4.0},
        {"type": SEARCH_EVENT, "source": "Sushi", "origin": "provider", "results_returned": 0,
         "twin_cuisines": [], "top_similarity": None, "response_time_ms": 10.0},
        {"type": "other", "source": "ignored"},
    ]
    body = compute_analytics(events)
    assert body["total_searches"] == 2
    assert body["avg_response_time_ms"] == 7.0
    assert body["top_twin_cuisines"][0] == {"name": "Indian", "count": 2}
    assert body["resolution_origins"] == {"catalog": 1, "provider": 1}
    assert body["empty_result_rate"] == 50.0
    assert body["avg_top_similarity"] == 80.0


def test_store_filters_by_type():
    clear_events()
    record_event(SEARCH_EVENT, {"source": "Ceviche"})
    record_event("other", {})
    assert len(get_events()) == 2
    assert [e["source"] for e in get_events(SEARCH_EVENT)] == ["Ceviche"]
    clear_events()
    assert get_events() == []


def test_store_keeps_only_the_newest_events():
    clear_events()
    cap = DEFAULT_ANALYTICS_CONFIG.max_events
    for i in range(cap + 25):
        record_event(SEARCH_EVENT, {"source": f"Dish {i}"})

    events = get_events()
    assert len(events) == cap
    assert events[0]["source"] == "Dish 25"
    assert events[-1]["source"] == f"Dish {cap + 24}"
    clear_events()
