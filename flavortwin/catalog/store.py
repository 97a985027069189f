from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..matching.models import Dish
from ..provider.mapping import map_raw_recipe
from .config import DEFAULT_CATALOG_CONFIG

logger = logging.getLogger(__name__)

_df: pd.DataFrame | None = None
_catalog: list[Dish] | None = None


def read_catalog_frame(path: Path) -> pd.DataFrame:
    return pd.read_json(path, orient="records", dtype=False, convert_dates=False)


def dishes_from_frame(df: pd.DataFrame) -> list[Dish]:
    """Validate catalog rows into Dish records, skipping unusable rows."""
    dishes: list[Dish] = []
    for record in df.to_dict(orient="records"):
        try:
            dishes.append(map_raw_recipe(record, default_nutrients=None))
        except ValueError as exc:
            logger.warning("Skipping catalog entry %r: %s", record.get("name"), exc)
    return dishes


def get_dataframe() -> pd.DataFrame:
    """Return the in-memory catalog DataFrame, loading it on first call."""
    global _df
    if _df is None:
        _df = read_catalog_frame(DEFAULT_CATALOG_CONFIG.catalog_path)
    return _df


def get_catalog() -> list[Dish]:
    """Return the validated catalog dishes in file order."""
    global _catalog
    if _catalog is None:
        _catalog = dishes_from_frame(get_dataframe())
        logger.info(
            "Loaded %d catalog dishes from %s",
            len(_catalog), DEFAULT_CATALOG_CONFIG.catalog_path,
        )
    return _catalog
