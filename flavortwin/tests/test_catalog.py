import json
from pathlib import Path

import pandas as pd

from flavortwin.catalog.config import CatalogConfig
from flavortwin.catalog.ingest import CANONICAL_COLUMNS, run_ingestion
from flavortwin.catalog.store import dishes_from_frame, get_catalog, get_dataframe, read_catalog_frame
from flavortwin.flavor.builder import build_vector, is_zero
from flavortwin.matching.models import Dish

RAW_RECIPES = [
    {
        "recipe_title": "Chicken Adobo",
        "region": "Filipino",
        "ingredients": [{"ingredient": "chicken"}, {"ingredient": "soy sauce"}, {"ingredient": "vinegar"}],
        "energy (kcal)": "430",
        "protein (g)": "36",
        "carbohydrate, by difference (g)": "6",
    },
    {"recipe_title": "chicken adobo", "region": "Filipino", "ingredients": ["chicken"]},
    {"recipe_title": "Empty Plate", "region": "Nowhere", "ingredients": []},
    {"name": "Ceviche", "cuisine": "Peruvian", "ingredients": ["white fish", "lime"]},
]


def test_packaged_catalog_loads_as_dishes():
    catalog = get_catalog()
    assert len(catalog) > 0
    assert all(isinstance(d, Dish) for d in catalog)
    names = {d.name for d in catalog}
    assert {"Butter Chicken", "Thai Red Curry"} <= names


def test_packaged_catalog_is_cross_cuisine():
    cuisines = {d.cuisine for d in get_catalog()}
    assert len(cuisines) >= 5


def test_packaged_catalog_keeps_missing_nutrients_as_none():
    by_name = {d.name: d for d in get_catalog()}
    assert by_name["Chicken Makhani Pizza"].nutrients is None
    assert by_name["Butter Chicken"].nutrients.energy == 490
    assert by_name["Butter Chicken"].sub_region == "North India"


def test_every_packaged_dish_has_a_flavor_profile():
    for dish in get_catalog():
        assert not is_zero(build_vector(dish.ingredients)), dish.name


def test_dataframe_matches_catalog():
    df = get_dataframe()
    assert len(df) == len(get_catalog())
    assert "cuisine" in df.columns


def test_dishes_from_frame_skips_rows_without_ingredients():
    df = pd.DataFrame([
        {"name": "Salted Caramel", "ingredients": ["sugar", "salt", "butter"], "cuisine": "French"},
        {"name": "Nothing", "ingredients": [], "cuisine": "None"},
    ])
    dishes = dishes_from_frame(df)
    assert [d.name for d in dishes] == ["Salted Caramel"]


def test_run_ingestion_writes_canonical_catalog(tmp_path: Path):
    raw_path = tmp_path / "raw.json"
    raw_path.write_text(json.dumps(RAW_RECIPES))
    cfg = CatalogConfig(processed_data_dir=tmp_path / "processed")

    output_path = run_ingestion(raw_path, config=cfg)

    assert output_path.is_file(), "Canonical catalog should be created"
    df = read_catalog_frame(output_path)
    assert list(df.columns) == CANONICAL_COLUMNS
    assert df["name"].tolist() == ["Chicken Adobo", "Ceviche"]

    dishes = dishes_from_frame(df)
    assert dishes[0].cuisine == "Filipino"
    assert dishes[0].nutrients.protein == 36
    assert dishes[1].nutrients is None


def test_run_ingestion_reads_csv(tmp_path: Path):
    raw_path = tmp_path / "raw.csv"
    pd.DataFrame([
        {"recipe_title": "Jerk Chicken", "region": "Caribbean", "ingredients": "chicken, scotch bonnet chili, thyme", "energy (kcal)": 460},
        {"recipe_title": "Untitled", "region": "Caribbean", "ingredients": None, "energy (kcal)": None},
    ]).to_csv(raw_path, index=False)
    cfg = CatalogConfig(processed_data_dir=tmp_path / "processed")

    dishes = dishes_from_frame(read_catalog_frame(run_ingestion(raw_path, config=cfg)))

    assert len(dishes) == 1
    assert dishes[0].ingredients == ["chicken", "scotch bonnet chili", "thyme"]
    assert dishes[0].nutrients.energy == 460
    assert dishes[0].nutrients.protein == 25
