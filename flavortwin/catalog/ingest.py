from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pandas as pd

from ..matching.models import Dish
from ..provider.mapping import map_raw_recipe
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CANONICAL_COLUMNS: List[str] = [
    "name",
    "ingredients",
    "cuisine",
    "continent",
    "subRegion",
    "nutrients",
    "image",
]


def _read_raw(raw_path: Path) -> pd.DataFrame:
    if raw_path.suffix.lower() == ".csv":
        return pd.read_csv(raw_path)
    return pd.read_json(raw_path, orient="records", dtype=False, convert_dates=False)


def _to_canonical(dish: Dish) -> dict[str, Any]:
    return {
        "name": dish.name,
        "ingredients": dish.ingredients,
        "cuisine": dish.cuisine,
        "continent": dish.continent,
        "subRegion": dish.sub_region,
        "nutrients": dish.nutrients.model_dump() if dish.nutrients else None,
        "image": dish.image,
    }


def run_ingestion(raw_path: Path, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Path:
    """
    Build a canonical catalog file from a raw recipe dump.

    Steps:
    - Read JSON records or CSV rows with provider-style field names.
    - Map each record through the provider boundary mapping.
    - Drop records without a name or ingredients, and repeated names.
    - Persist the canonical records as JSON.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = _read_raw(Path(raw_path))

    seen: set[str] = set()
    rows: list[dict[str, Any]] = []
    skipped = 0
    for record in df.to_dict(orient="records"):
        try:
            dish = map_raw_recipe(record, default_nutrients=None)
        except ValueError:
            skipped += 1
            continue
        if dish.key in seen:
            skipped += 1
            continue
        seen.add(dish.key)
        rows.append(_to_canonical(dish))

    canonical = pd.DataFrame(rows, columns=CANONICAL_COLUMNS)

    output_path = config.processed_path
    canonical.to_json(output_path, orient="records", indent=2)
    logger.info("Ingested %d dishes (%d skipped) into %s", len(rows), skipped, output_path)
    return output_path


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) != 2:
        sys.exit("usage: python -m flavortwin.catalog.ingest <raw recipes .json|.csv>")
    path = run_ingestion(Path(sys.argv[1]))
    print(f"Ingestion complete. Catalog saved to: {path}")
