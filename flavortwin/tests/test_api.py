from __future__ import annotations

import httpx
from fastapi.testclient import TestClient

from flavortwin.analytics.store import clear_events
from flavortwin.app import app, get_provider
from flavortwin.catalog.store import get_catalog
from flavortwin.provider.client import RecipeProvider
from flavortwin.provider.config import ProviderConfig

client = TestClient(app)


def _use_provider(provider: RecipeProvider) -> None:
    app.dependency_overrides[get_provider] = lambda: provider


def _reset_provider() -> None:
    app.dependency_overrides.pop(get_provider, None)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata_lists_cuisines_and_dimensions():
    body = client.get("/metadata").json()
    assert "Indian" in body["cuisines"]
    assert "Asia" in body["continents"]
    assert len(body["dimensions"]) == 10
    assert body["table_version"]
    assert body["catalog_size"] == len(get_catalog())


def test_vector_endpoint():
    resp = client.post("/vector", json={"ingredients": ["chili", "Coconut Milk", "water"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["raw"]["Heat"] == 1.5
    assert max(body["display"].values()) == 100.0
    assert all(v <= 100.0 for v in body["bounded"].values())
    assert body["matches"]["Coconut Milk"] == ["coconut milk"]
    assert body["matches"]["water"] == []
    assert body["dominant"] == "Heat"


def test_vector_endpoint_empty_list_is_all_zero():
    body = client.post("/vector", json={"ingredients": []}).json()
    assert set(body["raw"].values()) == {0.0}
    assert body["dominant"] is None


def test_twins_for_catalog_dish():
    resp = client.post("/twins", json={"dish": "butter chicken"})
    assert resp.status_code == 200
    body = resp.json()

    assert body["source"]["dish"]["name"] == "Butter Chicken"
    assert body["origin"] == "catalog"
    # ginger, garlic and fenugreek push Aromatic (4.0) above Creamy (3.0)
    display = body["source"]["display_vector"]
    assert display["Aromatic"] == 100.0
    assert display["Creamy"] == 75.0
    assert body["source"]["raw_vector"]["Creamy"] == 3.0
    assert len(body["twins"]) == 3
    for twin in body["twins"]:
        assert twin["dish"]["cuisine"] != "Indian"
        assert 0 <= twin["similarity"] <= 100
        assert twin["shared_traits"]

    sims = [t["similarity"] for t in body["twins"]]
    assert sims == sorted(sims, reverse=True)

    expected_candidates = sum(1 for d in get_catalog() if d.cuisine != "Indian")
    assert body["total_candidates"] == expected_candidates
    assert body["stages"] == [
        "Locating source recipe",
        "Mapping flavor dimensions",
        "Scanning catalog for flavor resonance",
        "Finalizing match",
    ]
    assert body["message"] is None


def test_twins_respects_k():
    body = client.post("/twins", json={"dish": "Thai Red Curry", "k": 5}).json()
    assert len(body["twins"]) == 5
    assert all(t["dish"]["cuisine"] != "Thai" for t in body["twins"])


def test_twins_validation_rejects_bad_k():
    assert client.post("/twins", json={"dish": "Pad Thai", "k": 0}).status_code == 422
    assert client.post("/twins", json={"dish": "Pad Thai", "k": 50}).status_code == 422


def test_twins_validation_rejects_empty_dish():
    assert client.post("/twins", json={"dish": ""}).status_code == 422


def test_twins_unknown_dish_without_provider_is_404():
    _use_provider(RecipeProvider(ProviderConfig(base_url="")))
    try:
        resp = client.post("/twins", json={"dish": "Nonexistent12345"})
    finally:
        _reset_provider()
    assert resp.status_code == 404


def test_twins_provider_failure_is_502():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, text="down"))
    _use_provider(RecipeProvider(ProviderConfig(base_url="https://recipes.test"), transport=transport))
    try:
        resp = client.post("/twins", json={"dish": "Nonexistent12345"})
    finally:
        _reset_provider()
    assert resp.status_code == 502


def test_twins_resolved_through_provider():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/recipes/search":
            return httpx.Response(200, json=[{"recipe_id": 11, "recipe_title": "Tom Yum"}])
        return httpx.Response(200, json={
            "recipe": {"recipe_title": "Tom Yum", "cuisine": "Thai", "energy (kcal)": 210},
            "ingredients": ["shrimp", "lemongrass", "lime", "chili", "fish sauce"],
        })

    _use_provider(RecipeProvider(ProviderConfig(base_url="https://recipes.test"),
                                 transport=httpx.MockTransport(handler)))
    try:
        resp = client.post("/twins", json={"dish": "tom yum"})
    finally:
        _reset_provider()

    assert resp.status_code == 200
    body = resp.json()
    assert body["origin"] == "provider"
    assert body["source"]["dish"]["nutrients"] == {"energy": 210.0, "protein": 25.0, "carbs": 45.0}
    assert "Parsing recipe detail" in body["stages"]
    assert all(t["dish"]["cuisine"] != "Thai" for t in body["twins"])


def test_analytics_tracks_searches():
    clear_events()
    assert client.get("/analytics").json()["total_searches"] == 0

    client.post("/twins", json={"dish": "butter chicken"})
    client.post("/twins", json={"dish": "guacamole"})
    client.post("/twins", json={"dish": "butter chicken"})

    body = client.get("/analytics").json()
    assert body["total_searches"] == 3
    assert body["top_sources"][0] == {"name": "Butter Chicken", "count": 2}
    assert body["resolution_origins"] == {"catalog": 3}
    assert body["empty_result_rate"] == 0.0
    assert body["avg_top_similarity"] > 0
