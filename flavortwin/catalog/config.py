from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for catalog loading and ingestion.
    """

    catalog_path: Path = _DATA_DIR / "flavor_universe.json"
    processed_data_dir: Path = Path("flavortwin/data/processed")
    processed_filename: str = "flavor_universe.json"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
