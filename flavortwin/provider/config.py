from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ProviderConfig:
    base_url: str = os.getenv("RECIPE_API_BASE_URL", "")
    api_key: str = os.getenv("RECIPE_API_KEY", "")
    search_path: str = "/recipes/search"
    detail_path: str = "/recipes/{recipe_id}"
    timeout: float = float(os.getenv("RECIPE_API_TIMEOUT", "8.0"))
    enabled: bool = True

    @property
    def is_configured(self) -> bool:
        return self.enabled and bool(self.base_url)


DEFAULT_PROVIDER_CONFIG = ProviderConfig()
