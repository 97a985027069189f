"""
Boundary mapping from provider/raw recipe records to the canonical Dish.

Provider payloads use many alternate field names for the same value and
are loosely typed. Every alternate is probed here; the matching engine
only ever sees ``Dish``.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from ..matching.models import DEFAULT_NUTRIENTS, Dish, Nutrients

NAME_FIELDS = ["recipe_title", "name", "title", "Recipe_title"]
IMAGE_FIELDS = ["img_url", "image_url", "image"]
CUISINE_FIELDS = ["cuisine", "region", "Region"]
CONTINENT_FIELDS = ["continent", "Continent"]
SUB_REGION_FIELDS = ["subRegion", "sub_region", "Sub_region"]
INGREDIENT_FIELDS = ["ingredients", "ingredient_list", "Ingredients"]
ID_FIELDS = ["recipe_id", "Recipe_id", "id"]

ENERGY_FIELDS = ["energy (kcal)", "Energy (kcal)", "energy", "calories"]
PROTEIN_FIELDS = ["protein (g)", "Protein (g)", "protein"]
CARBS_FIELDS = ["carbohydrate, by difference (g)", "Carbohydrate, by difference (g)", "carbs", "carbohydrates"]

_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def _first_present(record: Mapping[str, Any], fields: list[str]) -> Any:
    for field in fields:
        value = record.get(field)
        # NaN marks a missing cell in pandas-loaded records
        if isinstance(value, float) and value != value:
            continue
        if value is not None and not (isinstance(value, str) and not value.strip()):
            return value
    return None


def _parse_number(value: Any, default: float) -> float:
    """Leading non-negative number of *value* ("520 kcal" -> 520.0), else *default*."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if value >= 0 and value == value else default
    if value is None:
        return default
    m = _NUMBER_RE.match(str(value))
    return float(m.group(1)) if m else default


def parse_nutrients(
    record: Mapping[str, Any],
    default: Nutrients | None = DEFAULT_NUTRIENTS,
) -> Nutrients | None:
    """
    Read energy/protein/carbs from a raw record.

    Looks in a nested ``nutrients`` mapping first, then at the top level.
    Returns *default* when no nutrient field is present at all; fields that
    are present but unparseable fall back to the standard defaults.
    """
    nested = record.get("nutrients")
    source: Mapping[str, Any] = nested if isinstance(nested, Mapping) else record

    energy = _first_present(source, ENERGY_FIELDS)
    protein = _first_present(source, PROTEIN_FIELDS)
    carbs = _first_present(source, CARBS_FIELDS)
    if energy is None and protein is None and carbs is None:
        return default

    return Nutrients(
        energy=_parse_number(energy, DEFAULT_NUTRIENTS.energy),
        protein=_parse_number(protein, DEFAULT_NUTRIENTS.protein),
        carbs=_parse_number(carbs, DEFAULT_NUTRIENTS.carbs),
    )


def parse_ingredients(raw: Any) -> list[str]:
    """Accept ingredient items as plain strings or ``{"ingredient": ...}`` records."""
    if raw is None:
        return []
    if isinstance(raw, str):
        text = raw.strip()
        # CSV dumps carry lists either as JSON arrays or comma-separated text
        if text.startswith("["):
            try:
                raw = json.loads(text)
            except ValueError:
                raw = text.strip("[]").split(",")
        else:
            raw = text.split(",")
    items: list[str] = []
    for item in raw:
        if isinstance(item, Mapping):
            item = _first_present(item, ["ingredient", "name", "ingredient_name"])
        if item is None:
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items


def extract_search_hits(body: Any) -> list[dict[str, Any]]:
    """Unwrap the list of candidate stubs from a search response."""
    if isinstance(body, list):
        return [hit for hit in body if isinstance(hit, dict)]
    if isinstance(body, Mapping):
        payload = body.get("payload")
        if isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
            return extract_search_hits(payload["data"])
        if isinstance(body.get("data"), list):
            return extract_search_hits(body["data"])
    return []


def stub_id(stub: Mapping[str, Any]) -> Any:
    return _first_present(stub, ID_FIELDS)


def _recipe_record(detail: Mapping[str, Any]) -> Mapping[str, Any]:
    for key in ("recipe", "data"):
        if isinstance(detail.get(key), Mapping):
            return detail[key]
    payload = detail.get("payload")
    if isinstance(payload, Mapping) and isinstance(payload.get("data"), Mapping):
        return payload["data"]
    return detail


def map_raw_recipe(
    detail: Mapping[str, Any],
    stub: Mapping[str, Any] | None = None,
    default_nutrients: Nutrients | None = DEFAULT_NUTRIENTS,
) -> Dish:
    """
    Build a canonical Dish from a raw recipe record.

    *stub* is the search hit the detail was fetched for; it fills in
    name, image and cuisine when the detail lacks them. Raises ValueError
    when no name or no ingredients can be found.
    """
    stub = stub or {}
    recipe = _recipe_record(detail)

    name = _first_present(recipe, NAME_FIELDS) or _first_present(stub, NAME_FIELDS)
    if not name or not str(name).strip():
        raise ValueError("recipe record has no name")

    raw_ingredients = _first_present(detail, INGREDIENT_FIELDS)
    if raw_ingredients is None:
        raw_ingredients = _first_present(recipe, INGREDIENT_FIELDS)
    ingredients = parse_ingredients(raw_ingredients)
    if not ingredients:
        raise ValueError(f"recipe {name!r} has no ingredients")

    image = _first_present(recipe, IMAGE_FIELDS) or _first_present(stub, IMAGE_FIELDS)
    cuisine = _first_present(recipe, CUISINE_FIELDS) or _first_present(stub, CUISINE_FIELDS)

    return Dish(
        name=str(name).strip(),
        ingredients=ingredients,
        cuisine=str(cuisine or "Unknown"),
        continent=str(_first_present(recipe, CONTINENT_FIELDS) or "Global"),
        sub_region=str(_first_present(recipe, SUB_REGION_FIELDS) or "Gastronomic Universe"),
        nutrients=parse_nutrients(recipe, default=default_nutrients),
        image=str(image) if image else None,
    )
