from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import DEFAULT_PROVIDER_CONFIG, ProviderConfig
from .mapping import extract_search_hits

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "FlavorTwin/0.1", "Accept": "application/json"}


class ProviderError(RuntimeError):
    """The recipe provider failed, timed out or returned an unusable body."""


class RecipeProvider:
    """
    Async client for the remote recipe search/detail API.

    Returns provider records untouched; callers turn them into ``Dish``
    objects with ``mapping.map_raw_recipe``.
    """

    def __init__(
        self,
        config: ProviderConfig = DEFAULT_PROVIDER_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = dict(HEADERS)
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=headers,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            async with self._client() as cli:
                r = await cli.get(path, params=params)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as exc:
            logger.warning("Recipe provider request to %s failed", path, exc_info=True)
            raise ProviderError(f"recipe provider request failed: {exc}") from exc
        except ValueError as exc:
            logger.warning("Recipe provider returned invalid JSON for %s", path, exc_info=True)
            raise ProviderError("recipe provider returned invalid JSON") from exc

    async def search_by_title(self, query: str, page: int = 1, limit: int = 1) -> list[dict[str, Any]]:
        body = await self._get_json(
            self.config.search_path,
            params={"title": query, "page": page, "limit": limit},
        )
        return extract_search_hits(body)

    async def get_detail(self, recipe_id: str | int) -> dict[str, Any]:
        body = await self._get_json(self.config.detail_path.format(recipe_id=recipe_id))
        if not isinstance(body, dict):
            raise ProviderError(f"unexpected detail payload for recipe {recipe_id!r}")
        return body
